"""
Test suite for textargs

Contains:
- tests/unit/          : Unit tests for individual modules
"""
