"""
Test suite for bigint-core

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
