from pathlib import Path
import os
import subprocess
import sys

from aba.builder import generate_aba
from aba.cli import main

REGISTROS = [
    {"bsb": "062-000", "account_number": "12345678", "title": "ALICE", "amount": 1000,
     "trace_bsb": "062-001", "trace_account": "87654321"},
    {"bsb": "062-000", "account_number": "23456789", "title": "BOB", "amount": 2500,
     "trace_bsb": "062-001", "trace_account": "87654321"},
]


def build(path: Path, **overrides) -> Path:
    config = dict(bank_name="CBA", user_name="Acme Pty Ltd", apca_id=301500)
    config.update(overrides)
    return generate_aba(path, REGISTROS, **config)


def test_main_reports_clean_file(tmp_path: Path) -> None:
    source = build(tmp_path / "clean.aba")

    code = main([str(source), "--reports-dir", str(tmp_path)])

    assert code == 0
    assert list((tmp_path / "reports" / "clean").glob("clean.*.json"))
    assert list((tmp_path / "reports" / "clean").glob("clean.*.txt"))


def test_main_warns_on_omitted_totals(tmp_path: Path) -> None:
    source = build(tmp_path / "omitted.aba", omit_batch_totals=True)

    assert main([str(source), "--reports-dir", str(tmp_path)]) == 1
    assert main([str(source), "--reports-dir", str(tmp_path), "--strict"]) == 2


def test_main_fails_on_unreadable_file(tmp_path: Path) -> None:
    source = tmp_path / "broken.aba"
    source.write_bytes(b"X" * 120 + b"\n")

    assert main([str(source), "--reports-dir", str(tmp_path)]) == 2
    assert main([str(tmp_path / "missing.aba")]) == 2


def test_package_runs_as_module(tmp_path: Path) -> None:
    source = build(tmp_path / "module.aba")
    env = dict(os.environ, PYTHONPATH=str(Path(__file__).resolve().parents[1]))

    result = subprocess.run(
        [sys.executable, "-m", "aba", str(source), "--reports-dir", str(tmp_path)],
        capture_output=True,
        text=True,
        env=env,
    )

    assert result.returncode == 0
    assert "Reports generated:" in result.stdout
    assert list((tmp_path / "reports" / "module").glob("module.*.json"))
