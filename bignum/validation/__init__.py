"""Validation tools that run outside the test suite."""
