"""Serialization and archive output."""
