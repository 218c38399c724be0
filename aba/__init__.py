"""Encode and decode ABA (Cemtex) direct entry payment files."""
from __future__ import annotations

from .errors import (
    ABAError,
    InsufficientRecordsError,
    InvalidRecordError,
    MalformedLineError,
    MissingApcaIdError,
    MissingSubmitterBankError,
    MissingSubmitterIdError,
    UnexpectedRecordTypeError,
)
from .header import Header
from .reader import Reader
from .record import DetailRecord
from .trailer import Trailer
from .writer import Writer, WriterConfig

__all__ = [
    "ABAError",
    "DetailRecord",
    "Header",
    "InsufficientRecordsError",
    "InvalidRecordError",
    "MalformedLineError",
    "MissingApcaIdError",
    "MissingSubmitterBankError",
    "MissingSubmitterIdError",
    "Reader",
    "Trailer",
    "UnexpectedRecordTypeError",
    "Writer",
    "WriterConfig",
]
