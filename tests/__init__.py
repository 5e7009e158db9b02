"""
Test suite for numseq

Contains:
- tests/unit/          : Unit tests for individual modules
"""
