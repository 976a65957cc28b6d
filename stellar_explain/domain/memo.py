"""Transaction memo model.

A memo is one of: none, text (at most 28 UTF-8 bytes), id (unsigned 64-bit),
hash or return (32-byte values carried hex-encoded).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

MAX_TEXT_MEMO_BYTES = 28
MAX_ID_MEMO = 2**64 - 1


class MemoType(StrEnum):
    NONE = "none"
    TEXT = "text"
    ID = "id"
    HASH = "hash"
    RETURN = "return"


@dataclass(frozen=True)
class Memo:
    kind: MemoType
    value: str | int | None = None

    @classmethod
    def none(cls) -> Memo:
        return cls(MemoType.NONE)

    @classmethod
    def text(cls, text: str) -> Memo | None:
        """Build a text memo, or return None when it exceeds the byte limit."""
        if len(text.encode("utf-8")) > MAX_TEXT_MEMO_BYTES:
            return None
        return cls(MemoType.TEXT, text)

    @classmethod
    def id(cls, value: int) -> Memo | None:
        if value < 0 or value > MAX_ID_MEMO:
            return None
        return cls(MemoType.ID, value)

    @classmethod
    def hash(cls, value: str) -> Memo:
        return cls(MemoType.HASH, value)

    @classmethod
    def return_hash(cls, value: str) -> Memo:
        return cls(MemoType.RETURN, value)

    @property
    def is_none(self) -> bool:
        return self.kind is MemoType.NONE

    @property
    def memo_type(self) -> str:
        return self.kind.value

    def value_string(self) -> str | None:
        if self.value is None:
            return None
        return str(self.value)

    def display(self) -> str:
        """Short human-readable form, e.g. ``"Text: invoice 42"``."""
        if self.kind is MemoType.NONE:
            return "No memo"
        prefix = {
            MemoType.TEXT: "Text",
            MemoType.ID: "ID",
            MemoType.HASH: "Hash",
            MemoType.RETURN: "Return",
        }[self.kind]
        return f"{prefix}: {self.value}"
