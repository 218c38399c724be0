"""
aba/builder.py
Generates complete ABA direct entry files from plain dictionaries.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping
import logging

from .record import DetailRecord
from .utils import CREDIT
from .writer import Writer, WriterConfig

logger = logging.getLogger(__name__)


def build_record(registro: Mapping[str, object]) -> DetailRecord:
    """Map a dictionary onto a detail record; amounts are given in cents."""
    return DetailRecord(
        bsb=str(registro.get("bsb", "")),
        account_number=str(registro.get("account_number", "")),
        title=str(registro.get("title", "")),
        amount=int(registro.get("amount", 0)),
        transaction_code=str(registro.get("transaction_code", CREDIT)),
        indicator=str(registro.get("indicator", "")),
        lodgement_reference=str(registro.get("lodgement_reference", "")),
        trace_bsb=str(registro.get("trace_bsb", "")),
        trace_account=str(registro.get("trace_account", "")),
        remitter_name=str(registro.get("remitter_name", "")),
        withholding_tax=int(registro.get("withholding_tax", 0)),
    )


def generate_aba(output_path: Path, registros: Iterable[Mapping[str, object]], **config) -> Path:
    """
    Writes a full ABA file to ``output_path``.
    registros: iterable of dicts using DetailRecord field names.
    config: WriterConfig fields (bank_name, user_name, apca_id, ...).
    """
    records = [build_record(registro) for registro in registros]

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wb") as handle:
        writer = Writer(handle, WriterConfig(**config))
        writer.write(records)
        writer.flush()

    logger.info("ABA file generated at %s (%d records)", output_path, len(records))
    return output_path


if __name__ == "__main__":
    from .utils import DEBIT, configure_logging

    configure_logging()
    registros_teste = [
        {"bsb": "888-123", "account_number": "3424", "title": "DEMO DEMO", "amount": 1000,
         "trace_bsb": "111-111", "trace_account": "999999999", "remitter_name": "SpaceshipAU"},
        {"bsb": "999-888", "account_number": "12112", "title": "MR NICK GLYNN", "amount": 1000,
         "trace_bsb": "999-999", "trace_account": "999999999", "remitter_name": "SpaceshipAU"},
        {"bsb": "182-222", "account_number": "260070750", "title": "Macquarie Account", "amount": 2000,
         "transaction_code": DEBIT, "trace_bsb": "999-999", "trace_account": "999999999",
         "remitter_name": "ddu", "lodgement_reference": "ABLE"},
    ]
    generate_aba(
        Path("reports/sample/sample.aba"),
        registros_teste,
        bank_name="MBL",
        user_name="Macquarie Bank LTD",
        apca_id=181,
        description="WeeklyDebit",
    )
