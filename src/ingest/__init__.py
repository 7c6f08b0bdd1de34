"""Radar data ingestion pipeline.

This package resolves a data source from a request, fetches tabular rows,
validates and sanitizes them, and hands them to the model builder.
"""
