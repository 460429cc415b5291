"""Performance sentinel inputs and time budgets."""

from __future__ import annotations

import os
from typing import Any


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_WIDE_ARRAY_MS = _budget_from_env("JSONBEAUTIFY_MAX_WIDE_ARRAY_MS", 500.0)
MAX_DEEP_NESTING_MS = _budget_from_env("JSONBEAUTIFY_MAX_DEEP_NESTING_MS", 500.0)
MAX_RECORDS_MS = _budget_from_env("JSONBEAUTIFY_MAX_RECORDS_MS", 1000.0)

# Stays well below the default interpreter recursion limit.
DEEP_NESTING_LEVELS = 200


def wide_array(size: int = 20000) -> list:
    """Flat array of mixed scalars."""
    return [i if i % 3 else f"item-{i}" for i in range(size)]


def deep_nesting(levels: int = DEEP_NESTING_LEVELS) -> Any:
    """Alternating object/array nesting ``levels`` deep."""
    value: Any = "leaf"
    for level in range(levels):
        value = {"level": level, "next": value} if level % 2 else [value, level]
    return value


def records(count: int = 2000) -> list:
    """Array of small records, the typical shape of API payloads."""
    return [
        {
            "id": i,
            "name": f"record {i}",
            "active": i % 2 == 0,
            "score": i / 7,
            "tags": ["a", "b"] if i % 5 else [],
            "owner": None,
        }
        for i in range(count)
    ]
