"""Utility helpers for fossilvc."""
