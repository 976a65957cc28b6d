"""Primitive text formatters shared by the explainers.

This module contains ZERO I/O. Pure string helpers.
"""

from collections.abc import Callable

LabelLookup = Callable[[str], str | None]

ACCOUNT_FLAG_NAMES = (
    (1, "AUTH_REQUIRED"),
    (2, "AUTH_REVOCABLE"),
    (4, "AUTH_IMMUTABLE"),
    (8, "CLAWBACK_ENABLED"),
)


def shorten_key(key: str) -> str:
    """Shorten keys longer than 12 characters to ``GABC...WXYZ``."""
    if len(key) > 12:
        return f"{key[:4]}...{key[-4:]}"
    return key


def shorten_balance_id(balance_id: str) -> str:
    if len(balance_id) > 16:
        return f"{balance_id[:8]}...{balance_id[-4:]}"
    return balance_id


def shorten_hash(value: str) -> str:
    if len(value) > 20:
        return f"{value[:8]}...{value[-8:]}"
    return value


def join_natural(items: list[str]) -> str:
    """Join with commas and a final "and" (Oxford comma for three or more)."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def flag_names(flags: int) -> list[str]:
    return [name for bit, name in ACCOUNT_FLAG_NAMES if flags & bit]


def describe_flags(flags: int) -> str:
    names = flag_names(flags)
    if not names:
        return str(flags)
    return ", ".join(names)


def display_address(address: str, label: str | None = None) -> str:
    """Render ``Label (GABC...WXYZ)`` for labelled addresses, the raw address otherwise."""
    if label:
        return f"{label} ({shorten_key(address)})"
    return address


def format_ledger_time(timestamp: str) -> str:
    """Reformat ``YYYY-MM-DDTHH:MM:SS[Z|+HH:MM]`` as ``YYYY-MM-DD at HH:MM UTC``.

    Best effort: input without a ``T`` separator, or whose time part does
    not start with ``HH:MM``, is returned unchanged. Never raises.
    """
    trimmed = timestamp.strip()
    if "T" not in trimmed:
        return timestamp

    date_part, _, time_part = trimmed.partition("T")
    if "Z" in time_part:
        time_part = time_part.split("Z", 1)[0]
    elif "+" in time_part:
        time_part = time_part.split("+", 1)[0]
    elif "-" in time_part[1:]:
        cut = time_part.index("-", 1)
        time_part = time_part[:cut]

    hh_mm = time_part[:5]
    if len(hh_mm) != 5 or hh_mm[2] != ":" or not (hh_mm[:2] + hh_mm[3:]).isdigit():
        return timestamp
    return f"{date_part} at {hh_mm} UTC"
