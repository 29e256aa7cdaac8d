"""Shared fakes for the relay test suite."""
