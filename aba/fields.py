"""Fixed-width field formatting primitives shared by every record codec."""
from __future__ import annotations

import re
import unicodedata

from .errors import MalformedLineError
from .utils import RECORD_LENGTH, strip_terminator

BSB_PATTERN = re.compile(r"[0-9]{3}-[0-9]{3}")

_PRINTABLE_FIRST = " "
_PRINTABLE_LAST = "~"


def pad_right(text: str, width: int, fill: str = " ") -> str:
    """Left-justify ``text`` to exactly ``width`` characters.

    Oversized input is truncated silently; fixed-width layouts never grow.
    """
    value = str(text or "")
    if len(value) < width:
        value = value + fill * (width - len(value))
    return value[:width]


def spaces(width: int) -> str:
    return pad_right("", width)


def zero_fill(value: int, width: int) -> str:
    """Render a non-negative integer right-justified with zeros.

    A value wider than ``width`` keeps its least significant digits only.
    """
    if value < 0:
        raise ValueError(f"Cannot zero-fill a negative value: {value}")
    digits = str(int(value))
    return digits[-width:].rjust(width, "0")


def sanitize_text(text: str) -> str:
    """Reduce text to printable ASCII so multi-byte input never shifts columns."""
    decomposed = unicodedata.normalize("NFD", str(text or ""))
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    composed = unicodedata.normalize("NFC", stripped)
    return "".join(ch for ch in composed if _PRINTABLE_FIRST <= ch <= _PRINTABLE_LAST)


def parse_int(value: str) -> int:
    """Lenient integer parse for decoded fields; blanks and garbage become 0."""
    striped = value.strip()
    if not (striped.isascii() and striped.isdigit()):
        return 0
    return int(striped)


def is_valid_bsb(value: str) -> bool:
    return BSB_PATTERN.fullmatch(value or "") is not None


def record_payload(line: str, record_type: str, allow_terminator: bool = True) -> str:
    """Return the fixed-width payload of ``line`` or raise ``MalformedLineError``."""
    payload = strip_terminator(line) if allow_terminator else line
    if len(payload) != RECORD_LENGTH:
        raise MalformedLineError(RECORD_LENGTH, len(payload), record_type)
    return payload


__all__ = [
    "BSB_PATTERN",
    "is_valid_bsb",
    "pad_right",
    "parse_int",
    "record_payload",
    "sanitize_text",
    "spaces",
    "zero_fill",
]
