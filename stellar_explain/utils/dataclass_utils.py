"""Helpers for turning explanation dataclasses into plain dicts."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any


def _plain(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    return {key: value.value if isinstance(value, Enum) else value for key, value in pairs}


def to_dict(obj: Any) -> dict[str, Any]:
    """Convert a (possibly nested) dataclass to a JSON-friendly dict.

    Enum members are replaced by their values.
    """
    if isinstance(obj, dict):
        return obj
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj, dict_factory=_plain)
    return {}
