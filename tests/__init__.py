"""
Test suite for near-gas

Contains:
- tests/unit/          : Unit tests for individual modules
"""
