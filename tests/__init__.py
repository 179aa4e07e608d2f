"""
Test suite for weekid

Contains:
- tests/unit/          : Unit tests for individual modules
"""
