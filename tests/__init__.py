"""
Test suite for ppwd - prompt-friendly working directory.

This package contains:
- Unit tests for the compressor, parsing, environment and settings
- Integration tests running the full command
- Edge case tests for unusual paths and arguments
"""
