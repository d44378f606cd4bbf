"""Service layer: validation, sanitizing and bookmark operations."""
