"""Test suite for the Kotlin Metadata Reader.

Test Structure:
- core/: byte cursor, wire reader and payload bit encoding
- domain/: metadata models, parsing, matching, cache and the nullability oracle
- config/: configuration management
- infrastructure/: logging setup
- performance/: concurrent queries against a shared cache

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m performance     # Run performance tests only
    pytest -m "not slow"      # Skip slow tests
"""
