"""ABA codec exception hierarchy."""
from __future__ import annotations

from typing import Optional


class ABAError(Exception):
    """Base exception for all ABA codec errors."""


class InsufficientRecordsError(ABAError):
    """Fewer detail records than the writer accepts."""

    def __init__(self, count: int, minimum: int = 2) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"Not enough records (minimum {minimum} required, got {count})")


class MissingSubmitterBankError(ABAError):
    """Header has no bank mnemonic."""

    def __init__(self) -> None:
        super().__init__("Didn't specify the user's bank")


class MissingSubmitterIdError(ABAError):
    """Header has no user (submitter) name."""

    def __init__(self) -> None:
        super().__init__("Didn't specify the user's ID")


class MissingApcaIdError(ABAError):
    """Header has no numeric APCA user ID."""

    def __init__(self) -> None:
        super().__init__("Didn't specify the APCA ID")


class InvalidRecordError(ABAError):
    """A detail record failed validation."""

    def __init__(self, index: Optional[int] = None) -> None:
        self.index = index
        if index is None:
            message = "Invalid record"
        else:
            message = f"Invalid record can't be written (record {index})"
        super().__init__(message)


class MalformedLineError(ABAError):
    """A line does not have the fixed record length."""

    def __init__(self, expected_length: int, actual_length: int, record_type: str = "") -> None:
        self.expected_length = expected_length
        self.actual_length = actual_length
        self.record_type = record_type
        super().__init__(
            f"Bad {record_type or 'line'}: expected {expected_length} characters, got {actual_length}"
        )


class UnexpectedRecordTypeError(ABAError):
    """A line starts with something other than 0, 1 or 7."""

    def __init__(self, byte: str, line_number: Optional[int] = None) -> None:
        self.byte = byte
        self.line_number = line_number
        location = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Unexpected record type {byte!r}{location}, can decode 0, 1 and 7 only")


__all__ = [
    "ABAError",
    "InsufficientRecordsError",
    "InvalidRecordError",
    "MalformedLineError",
    "MissingApcaIdError",
    "MissingSubmitterBankError",
    "MissingSubmitterIdError",
    "UnexpectedRecordTypeError",
]
