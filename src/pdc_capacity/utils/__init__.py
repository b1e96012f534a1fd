"""Shared helpers: logging, settings, number formatting."""
