"""
Test suite for SciNum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
