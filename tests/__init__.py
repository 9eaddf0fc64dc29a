# Textbook Crypto Test Suite
"""
Test suite including:
- Unit tests (number theory, RSA, letter cipher modes)
- Table-driven runner tests
- Integration tests (hybrid RSA + CBC, command line, demo)
- Invalid input tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
