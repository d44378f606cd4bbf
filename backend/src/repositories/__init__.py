"""Persistence boundary for bookmarks."""
