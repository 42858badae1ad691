"""Rooms app package.

Owns the occupancy status of each room and answers interval-overlap
availability queries against active bookings. Room metadata management
lives elsewhere; the booking engine only ever writes ``Room.status``.
"""
