"""Shared pytest configuration: load the flag_tags fixtures."""

pytest_plugins = ["flag_tags.testing.fixtures"]
