"""Slug resolution and per-item category metadata."""
