"""
Test suite for ventas-genericos

Contains:
- tests/unit/          : Unit tests for individual modules
"""
