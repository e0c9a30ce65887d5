"""Interfaces: structured data boundary."""
