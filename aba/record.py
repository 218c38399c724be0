"""Detail (type 1) record: one transaction per line.

Layout (1-based, inclusive):
  1       record type, always 1
  2-8     BSB, 999-999
  9-17    account number
  18      indicator: W, X, Y, N or blank
  19-20   transaction code (13 debit, 50-57 credit family)
  21-30   amount in cents, zero filled
  31-62   account title, left justified, blank filled; must not be blank
  63-80   lodgement reference
  81-87   trace BSB of the user supplying the file
  88-96   trace account number
  97-112  name of remitter
  113-120 withholding tax in cents, zero filled
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from .errors import InvalidRecordError
from .fields import (
    is_valid_bsb,
    pad_right,
    parse_int,
    record_payload,
    sanitize_text,
    zero_fill,
)
from .utils import (
    CREDIT,
    CREDIT_FAMILY_PREFIX,
    DEBIT,
    DETAIL_CODE,
    RECORD_LENGTH,
    TRANSACTION_CODES,
)

logger = logging.getLogger(__name__)


@dataclass
class DetailRecord:
    """Single transaction line."""

    bsb: str = ""
    account_number: str = ""
    title: str = ""
    amount: int = 0
    transaction_code: str = CREDIT
    indicator: str = ""
    lodgement_reference: str = ""
    trace_bsb: str = ""
    trace_account: str = ""
    remitter_name: str = ""
    withholding_tax: int = 0

    @property
    def is_debit(self) -> bool:
        return self.transaction_code == DEBIT

    @property
    def is_credit(self) -> bool:
        return self.transaction_code.startswith(CREDIT_FAMILY_PREFIX)

    def validate(self) -> bool:
        if self.transaction_code not in TRANSACTION_CODES:
            logger.debug("Record: unknown transaction code %r", self.transaction_code)
            return False
        if not self.title.strip():
            logger.debug("Record: blank title")
            return False
        if not is_valid_bsb(self.trace_bsb):
            logger.debug("Record: bad trace BSB %r", self.trace_bsb)
            return False
        if not is_valid_bsb(self.bsb):
            logger.debug("Record: bad BSB %r", self.bsb)
            return False
        return True

    def encode(self) -> str:
        line = (
            DETAIL_CODE
            + pad_right(self.bsb, 7)
            + pad_right(sanitize_text(self.account_number), 9)
            + pad_right(sanitize_text(self.indicator), 1)
            + pad_right(self.transaction_code, 2)
            + zero_fill(self.amount, 10)
            + pad_right(sanitize_text(self.title), 32)
            + pad_right(sanitize_text(self.lodgement_reference), 18)
            + pad_right(self.trace_bsb, 7)
            + pad_right(sanitize_text(self.trace_account), 9)
            + pad_right(sanitize_text(self.remitter_name), 16)
            + zero_fill(self.withholding_tax, 8)
        )
        return pad_right(line, RECORD_LENGTH, "#")

    @classmethod
    def decode(cls, line: str) -> "DetailRecord":
        payload = record_payload(line, "record")
        record = cls(
            bsb=payload[1:8].strip(),
            account_number=payload[8:17].strip(),
            indicator=payload[17:18].strip(),
            transaction_code=payload[18:20].strip(),
            amount=parse_int(payload[20:30]),
            title=payload[30:62].strip(),
            lodgement_reference=payload[62:80].strip(),
            trace_bsb=payload[80:87].strip(),
            trace_account=payload[87:96].strip(),
            remitter_name=payload[96:112].strip(),
            withholding_tax=parse_int(payload[112:120]),
        )
        if not record.validate():
            raise InvalidRecordError()
        return record


__all__ = ["DetailRecord"]
