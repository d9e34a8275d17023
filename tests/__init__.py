"""
Test Suite for the Net Worth Tracker

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI workflow tests

All test data is synthetic.
"""
