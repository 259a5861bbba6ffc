"""
Test suite for magnitude_namer

Contains:
- tests/unit/          : Unit tests for individual modules
"""
