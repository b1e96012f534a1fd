"""Printable capacity reports."""
