"""Shared helpers: error taxonomy and currency arithmetic."""
