"""
Test suite for gpstime

Contains:
- tests/unit/          : Unit tests for individual modules
"""
