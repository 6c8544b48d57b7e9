"""Canonical taxonomy index and backend category models."""
