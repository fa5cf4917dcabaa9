"""Shared helpers: character tables, exceptions and logging."""
