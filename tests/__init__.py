"""
Test suite for the BigInteger library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
