"""
SessionAuth Test Suite.

This package contains all test modules organized by test type:
- unit/ - Unit tests for hashing, service, stores and configuration
- integration/ - HTTP tests against the in-process FastAPI app
- performance/ - Performance benchmarks
- data/ - Test data factories
"""
