"""Shared fixture helpers for tests."""

from __future__ import annotations

from pathlib import Path


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path


def fixture_text(relative_path: str) -> str:
    """Read a UTF-8 fixture file under tests/fixtures."""
    return fixture_path(relative_path).read_text(encoding="utf-8")
