"""Descriptive (type 0) record: one per file, ahead of every detail line.

Layout (1-based, inclusive):
  1       record type, always 0
  2-18    blank
  19-20   reel sequence number, zero filled
  21-23   user's financial institution mnemonic (e.g. MBL)
  24-30   blank
  31-56   user name, left justified, blank filled
  57-62   APCA user ID, zero filled
  63-74   description, left justified, blank filled
  75-80   processing date, DDMMYY
  81-120  blank
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import datetime as _dt
import logging

from .fields import pad_right, parse_int, record_payload, sanitize_text, spaces, zero_fill
from .utils import HEADER_CODE, RECORD_LENGTH

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d%m%y"


@dataclass
class Header:
    """File descriptor line."""

    bank_name: str = ""
    user_name: str = ""
    apca_id: int = 0
    description: str = ""
    processing_date: Optional[_dt.date] = field(default_factory=_dt.date.today)
    sequence_number: int = 1
    record_type: int = 0

    def encode(self) -> str:
        date_str = self.processing_date.strftime(DATE_FORMAT) if self.processing_date else spaces(6)
        line = (
            HEADER_CODE
            + spaces(17)
            + zero_fill(self.sequence_number, 2)
            + pad_right(sanitize_text(self.bank_name), 3)
            + spaces(7)
            + pad_right(sanitize_text(self.user_name), 26)
            + zero_fill(self.apca_id, 6)
            + pad_right(sanitize_text(self.description), 12)
            + date_str
        )
        return pad_right(line, RECORD_LENGTH)

    @classmethod
    def decode(cls, line: str) -> "Header":
        payload = record_payload(line, "header")
        return cls(
            record_type=parse_int(payload[0:1]),
            sequence_number=parse_int(payload[18:20]),
            bank_name=payload[20:23].strip(),
            user_name=payload[30:56].strip(),
            apca_id=parse_int(payload[56:62]),
            description=payload[62:74].strip(),
            processing_date=_parse_date(payload[74:80]),
        )


def _parse_date(value: str) -> Optional[_dt.date]:
    try:
        return _dt.datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        logger.debug("Header: unreadable processing date %r", value)
        return None


__all__ = ["Header", "DATE_FORMAT"]
