"""Presentation boundary for built radars."""
