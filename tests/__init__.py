"""
Test suite for the arithmetic module

Contains:
- tests/unit/          : Unit tests for individual modules
"""
