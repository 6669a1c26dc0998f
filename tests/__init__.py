"""
finparse Test Suite

Test organization:
- test_*.py - Unit tests per pipeline stage and end-to-end parser tests
- conftest.py - Shared fixtures and configuration

Usage:
    pytest                                  # Run all tests
    pytest tests/test_transaction_parser.py # Run specific test file
    pytest -k "currency"                    # Run tests matching pattern
    pytest -m unit                          # Run only unit tests
    pytest -m "not slow"                    # Skip slow tests
"""
