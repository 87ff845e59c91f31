"""
Test suite for caltime

Contains:
- tests/unit/      : Unit tests for individual modules
- tests/property/  : Hypothesis property tests for cross-module invariants
"""
