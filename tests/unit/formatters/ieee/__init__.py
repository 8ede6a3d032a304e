"""Test package for the IEEE reference-list style."""
