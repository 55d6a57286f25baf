"""
Core domain models, money primitives, and invariants.

This package contains the building blocks that are independent of the
back-office persistence and UI (database, print window, forms).
"""
