"""
Test suite for bookshop-orders

Contains:
- tests/unit/          : Unit tests for individual modules
"""
