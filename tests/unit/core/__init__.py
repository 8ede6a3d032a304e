"""Test package for core configuration, logging and exceptions."""
