"""
Unit Tests for game_search

This package contains unit tests for all search core components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=game_search --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestPerfectPlay::test_empty_board_is_draw

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
