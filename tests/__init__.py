"""
Test suite for is-same

Contains:
- tests/unit/          : Unit tests for the sameness protocol and derive
"""
