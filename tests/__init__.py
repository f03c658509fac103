"""
Test suite for vector-reducers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
