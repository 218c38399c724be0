"""Write complete ABA files: header, detail lines and the derived trailer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Optional, Sequence
import datetime as _dt
import logging

from .errors import (
    InsufficientRecordsError,
    InvalidRecordError,
    MissingApcaIdError,
    MissingSubmitterBankError,
    MissingSubmitterIdError,
)
from .header import Header
from .record import DetailRecord
from .trailer import Trailer
from .utils import CRLF, LF

logger = logging.getLogger(__name__)

MINIMUM_RECORDS = 2


@dataclass
class WriterConfig:
    """Settings copied into the header and the writer when it is created."""

    bank_name: str = ""
    user_name: str = ""
    apca_id: int = 0
    description: str = "Creditors"
    processing_date: _dt.date = field(default_factory=_dt.date.today)
    sequence_number: int = 1
    omit_batch_totals: bool = False
    crlf_line_endings: bool = False


class Writer:
    """Buffer an ABA file in memory and forward it to ``sink`` on ``flush``.

    Nothing is staged unless the whole record set is valid. An ``OSError``
    raised by the sink is kept and re-raised by later ``write``/``flush``
    calls; ``error()`` reports it.
    """

    def __init__(self, sink: BinaryIO, config: Optional[WriterConfig] = None) -> None:
        config = config or WriterConfig()
        self.header = Header(
            bank_name=config.bank_name,
            user_name=config.user_name,
            apca_id=config.apca_id,
            description=config.description,
            processing_date=config.processing_date,
            sequence_number=config.sequence_number,
        )
        self.trailer = Trailer()
        # Some banks don't summarise credit/debit totals.
        self.omit_batch_totals = config.omit_batch_totals
        self.crlf_line_endings = config.crlf_line_endings
        self._sink = sink
        self._pending = bytearray()
        self._error: Optional[OSError] = None

    @property
    def terminator(self) -> str:
        return CRLF if self.crlf_line_endings else LF

    def write(self, records: Sequence[DetailRecord]) -> None:
        """Stage one complete file; a later ``write`` before ``flush`` replaces it."""
        if self._error is not None:
            raise self._error

        self._check(records)
        logger.info("Writing ABA file with %d records", len(records))

        trailer = Trailer(record_count=len(records))
        lines = [self.header.encode()]
        for index, record in enumerate(records):
            lines.append(record.encode())
            if not self.omit_batch_totals:
                self._accumulate(trailer, record, index)

        if not self.omit_batch_totals:
            trailer.net_total = self._net_total(trailer)
        lines.append(trailer.encode())

        terminator = self.terminator
        payload = "".join(line + terminator for line in lines)
        self.trailer = trailer
        self._pending[:] = payload.encode("ascii")

    def flush(self) -> None:
        if self._error is not None:
            raise self._error
        try:
            self._sink.write(bytes(self._pending))
            flush = getattr(self._sink, "flush", None)
            if flush is not None:
                flush()
        except OSError as exc:
            logger.error("Could not flush ABA output: %s", exc)
            self._error = exc
            raise
        self._pending.clear()

    def error(self) -> Optional[OSError]:
        return self._error

    def _check(self, records: Sequence[DetailRecord]) -> None:
        if len(records) < MINIMUM_RECORDS:
            raise InsufficientRecordsError(len(records), MINIMUM_RECORDS)
        if not self.header.bank_name.strip():
            raise MissingSubmitterBankError()
        if not self.header.user_name.strip():
            raise MissingSubmitterIdError()
        if self.header.apca_id == 0:
            raise MissingApcaIdError()
        for index, record in enumerate(records):
            if not record.validate():
                raise InvalidRecordError(index)
            if record.amount < 0 or record.withholding_tax < 0:
                logger.debug("Record %d: negative amount or withholding tax", index)
                raise InvalidRecordError(index)

    def _accumulate(self, trailer: Trailer, record: DetailRecord, index: int) -> None:
        if record.is_debit:
            trailer.debit_total += record.amount
        elif record.is_credit:
            trailer.credit_total += record.amount
        else:
            logger.warning(
                "Unknown transaction type %s in record %d", record.transaction_code, index
            )

    def _net_total(self, trailer: Trailer) -> int:
        net = trailer.credit_total - trailer.debit_total
        if net < 0:
            logger.warning(
                "Debit total %d exceeds credit total %d; net total clamped to zero",
                trailer.debit_total,
                trailer.credit_total,
            )
            return 0
        return net


__all__ = ["MINIMUM_RECORDS", "Writer", "WriterConfig"]
