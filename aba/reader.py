"""Read ABA files line by line, dispatching on the record type character."""
from __future__ import annotations

from typing import BinaryIO, Iterator, List, Optional
import logging

from .errors import InvalidRecordError, UnexpectedRecordTypeError
from .header import Header
from .record import DetailRecord
from .trailer import Trailer
from .utils import (
    DETAIL_CODE,
    HEADER_CODE,
    TRAILER_CODE,
    detect_newline,
    strip_bom,
    strip_terminator,
)

logger = logging.getLogger(__name__)


class Reader:
    """Decode detail records from ``source``.

    ``header`` and ``trailer`` are filled in as their lines go past. Detail
    lines that decode but fail validation are skipped and their line
    numbers kept in ``dropped_lines``; any other problem raises.
    """

    def __init__(self, source: BinaryIO) -> None:
        self.header: Optional[Header] = None
        self.trailer: Optional[Trailer] = None
        self.dropped_lines: List[int] = []
        self.line_count = 0
        self.newline = "NONE"
        self._source = source

    def read(self) -> Optional[DetailRecord]:
        """Return the next valid detail record, or ``None`` at end of input."""
        while True:
            raw = self._source.readline()
            if not raw:
                return None
            self.line_count += 1
            record = self._decode_line(raw, self.line_count)
            if record is not None:
                return record

    def read_all(self) -> List[DetailRecord]:
        records = list(self)
        logger.info(
            "Read %d records (%d dropped) from %d lines",
            len(records),
            len(self.dropped_lines),
            self.line_count,
        )
        return records

    def __iter__(self) -> Iterator[DetailRecord]:
        return iter(self.read, None)

    def _decode_line(self, raw: bytes, line_number: int) -> Optional[DetailRecord]:
        if line_number == 1:
            stripped = strip_bom(raw)
            if stripped is not raw:
                logger.warning("UTF-8 BOM removed from first line")
                raw = stripped
            self.newline = detect_newline(raw)

        # latin-1 keeps one character per byte so lengths match the wire.
        line = raw.decode("latin-1")
        kind = line[:1]

        if kind == HEADER_CODE:
            self.header = Header.decode(line)
        elif kind == DETAIL_CODE:
            try:
                return DetailRecord.decode(line)
            except InvalidRecordError:
                logger.debug("Dropping invalid detail record on line %d", line_number)
                self.dropped_lines.append(line_number)
        elif kind == TRAILER_CODE:
            self.trailer = Trailer.decode(strip_terminator(line))
        else:
            raise UnexpectedRecordTypeError(kind, line_number)
        return None


__all__ = ["Reader"]
