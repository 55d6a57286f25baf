"""
Test suite for travel-docs

Contains:
- tests/unit/          : Unit tests for individual modules
"""
