"""Helpers shared by every test suite: static data, utilities and target resolution."""
