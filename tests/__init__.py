"""
Test suite for zmanim_formatter

Contains:
- tests/unit/          : Unit tests for formatting primitives, pipeline and contracts
"""
