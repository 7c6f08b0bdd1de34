"""Radar entity model.

This module groups sanitized rows into rings, quadrants, and blips.
It hands an immutable radar aggregate to the presentation boundary.
"""
