"""
Unit Tests for the Battleships Tester

This package contains unit tests for all tester components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_statistics.py

    # Run with coverage
    pytest tests/ --cov=battleships --cov-report=html

    # Run specific test
    pytest tests/test_statistics.py::TestStatistics::test_scenario_a

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting

Process-level tests spawn tools/sample_ai.py with the current interpreter.
"""
