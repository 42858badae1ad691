"""Bookings app package.

This app encapsulates the booking lifecycle: the booking model, the status
state machine and the lifecycle service that applies transitions. Each
transition keeps room occupancy in step with the booking and consumes the
room's supplies from the warehouse once per stay, all inside a single
database transaction.
"""
