"""
Test suite for snpconv - Touchstone multi-port converter.

This package contains:
- Unit tests for the parser, matrix builder and format conversions
- Integration tests for the conversion entry points and the CLI
"""
