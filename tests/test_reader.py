import datetime as _dt
import io
import logging

import pytest

from aba.errors import MalformedLineError, UnexpectedRecordTypeError
from aba.header import Header
from aba.reader import Reader
from aba.record import DetailRecord
from aba.trailer import Trailer
from aba.utils import CREDIT, DEBIT
from aba.writer import Writer, WriterConfig


def sample_records() -> list[DetailRecord]:
    return [
        DetailRecord(
            bsb="888-123",
            account_number="3424",
            title="DEMO DEMO",
            transaction_code=CREDIT,
            amount=1000,
            trace_bsb="111-111",
            trace_account="999999999",
            remitter_name="SpaceshipAU",
        ),
        DetailRecord(
            bsb="999-888",
            account_number="12112",
            title="MR NICK GLYNN",
            transaction_code=CREDIT,
            amount=1000,
            trace_bsb="999-999",
            trace_account="999999999",
            remitter_name="SpaceshipAU",
            lodgement_reference="SuperstarHero",
        ),
        DetailRecord(
            bsb="182-222",
            account_number="260070750",
            title="Macquarie Account",
            transaction_code=DEBIT,
            amount=2000,
            trace_bsb="999-999",
            trace_account="999999999",
            remitter_name="ddu",
            lodgement_reference="ABLE",
        ),
    ]


def written_file(records=None, crlf: bool = False) -> bytes:
    sink = io.BytesIO()
    config = WriterConfig(
        bank_name="MBL",
        user_name="Macquarie Bank LTD",
        apca_id=181,
        description="WeeklyDebit",
        processing_date=_dt.date(2018, 1, 8),
        crlf_line_endings=crlf,
    )
    writer = Writer(sink, config)
    writer.write(records or sample_records())
    writer.flush()
    return sink.getvalue()


def test_reader_round_trips_writer_output() -> None:
    reader = Reader(io.BytesIO(written_file()))

    records = reader.read_all()

    assert records == sample_records()
    assert reader.header.bank_name == "MBL"
    assert reader.header.user_name == "Macquarie Bank LTD"
    assert reader.header.apca_id == 181
    assert reader.header.processing_date == _dt.date(2018, 1, 8)
    assert reader.trailer.record_count == 3
    assert reader.trailer.credit_total == 2000
    assert reader.trailer.debit_total == 2000
    assert reader.line_count == 5
    assert reader.newline == "LF"


def test_reader_handles_crlf_files() -> None:
    reader = Reader(io.BytesIO(written_file(crlf=True)))

    assert len(reader.read_all()) == 3
    assert reader.trailer.record_count == 3
    assert reader.newline == "CRLF"


def test_reader_accepts_trailer_without_terminator() -> None:
    data = written_file().rstrip(b"\n")

    reader = Reader(io.BytesIO(data))

    assert len(reader.read_all()) == 3
    assert reader.trailer is not None


def test_reader_drops_invalid_detail_lines() -> None:
    valid = sample_records()
    invalid = DetailRecord(bsb="888-123", account_number="1", title="   ", trace_bsb="111-111")
    lines = [
        Header(bank_name="MBL", user_name="X", apca_id=1).encode(),
        valid[0].encode(),
        invalid.encode(),
        valid[1].encode(),
        Trailer(record_count=3).encode(),
    ]
    payload = "".join(line + "\n" for line in lines).encode("ascii")

    reader = Reader(io.BytesIO(payload))
    records = reader.read_all()

    assert records == valid[:2]
    assert reader.dropped_lines == [3]
    detail_lines = sum(1 for line in lines if line.startswith("1"))
    assert len(records) + len(reader.dropped_lines) == detail_lines


def test_reader_rejects_unexpected_record_type() -> None:
    payload = written_file().replace(b"1888-123", b"9888-123", 1)

    with pytest.raises(UnexpectedRecordTypeError) as excinfo:
        Reader(io.BytesIO(payload)).read_all()

    assert excinfo.value.byte == "9"
    assert excinfo.value.line_number == 2


def test_reader_aborts_on_malformed_line() -> None:
    short_detail = sample_records()[0].encode()[:119] + "\n"
    payload = Header(bank_name="MBL").encode() + "\n" + short_detail

    with pytest.raises(MalformedLineError) as excinfo:
        Reader(io.BytesIO(payload.encode("ascii"))).read_all()

    assert excinfo.value.actual_length == 119
    assert excinfo.value.record_type == "record"


def test_reader_empty_input() -> None:
    reader = Reader(io.BytesIO(b""))

    assert reader.read_all() == []
    assert reader.header is None
    assert reader.trailer is None


def test_reader_strips_utf8_bom(caplog) -> None:
    payload = b"\xef\xbb\xbf" + written_file()

    with caplog.at_level(logging.WARNING, logger="aba.reader"):
        records = Reader(io.BytesIO(payload)).read_all()

    assert len(records) == 3
    assert any("BOM" in message for message in caplog.messages)


def test_reader_reads_one_record_at_a_time() -> None:
    reader = Reader(io.BytesIO(written_file()))

    first = reader.read()
    assert reader.header is not None
    assert first.title == "DEMO DEMO"
    assert reader.read().title == "MR NICK GLYNN"
    assert reader.read().title == "Macquarie Account"
    assert reader.read() is None
    assert reader.trailer.record_count == 3


def test_reader_is_iterable() -> None:
    titles = [record.title for record in Reader(io.BytesIO(written_file()))]

    assert titles == ["DEMO DEMO", "MR NICK GLYNN", "Macquarie Account"]
