"""Test package for schemas.

Contains unit tests for:
- Entry, Person, Date, NumberRange, FormattableString, QualifiedUrl
- Hierarchical entry selectors
"""
