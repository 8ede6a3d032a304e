"""Test package for formatters.

Contains unit tests for:
- RichText runs and formatting flags
- Shared name-list, range, edition and punctuation helpers
"""
