"""Shared utility functions."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: str | Path) -> Any:
    """Load a JSON document from disk.

    Invalid JSON raises ``ValueError`` (``json.JSONDecodeError``), a missing
    file raises ``FileNotFoundError``.
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def format_number(value: float) -> str:
    """Render whole numbers without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"
