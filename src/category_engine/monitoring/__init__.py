"""Logging setup for the category engine."""
