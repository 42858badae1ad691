"""Users app package.

Hotel staff and guest accounts. The booking engine consults the role
stored here to decide who may drive booking transitions.
"""
