"""
Test suite for the gold price calculator

Contains:
- tests/unit/          : Unit tests for calculation modules, storage and calculators
"""
