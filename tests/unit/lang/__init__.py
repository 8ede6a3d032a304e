"""Test package for English date, ordinal, language and casing rules."""
