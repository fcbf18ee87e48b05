"""Bundled JSON schemas and instance validation."""
