"""File total (type 7) record, derived by the writer from the detail lines."""
from __future__ import annotations

from dataclasses import dataclass

from .fields import pad_right, parse_int, record_payload, spaces, zero_fill
from .utils import RECORD_LENGTH, TRAILER_BSB, TRAILER_CODE


@dataclass
class Trailer:
    """Batch totals; amounts are in cents."""

    net_total: int = 0
    credit_total: int = 0
    debit_total: int = 0
    record_count: int = 0
    bsb: str = TRAILER_BSB
    record_type: int = 7

    def encode(self) -> str:
        line = (
            TRAILER_CODE
            + pad_right(self.bsb, 7)
            + spaces(12)
            + zero_fill(self.net_total, 10)
            + zero_fill(self.credit_total, 10)
            + zero_fill(self.debit_total, 10)
            + spaces(24)
            + zero_fill(self.record_count, 6)
        )
        return pad_right(line, RECORD_LENGTH)

    @classmethod
    def decode(cls, line: str) -> "Trailer":
        # The trailer carries no terminator tolerance.
        payload = record_payload(line, "trailer", allow_terminator=False)
        return cls(
            record_type=parse_int(payload[0:1]),
            bsb=payload[1:8].strip(),
            net_total=parse_int(payload[20:30]),
            credit_total=parse_int(payload[30:40]),
            debit_total=parse_int(payload[40:50]),
            record_count=parse_int(payload[74:80]),
        )


__all__ = ["Trailer"]
