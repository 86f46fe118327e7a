from datetime import datetime, timezone

from models import FailureItem, GasLookup, TxStatus
from report import SUCCESS_SENTENCE, TABLE_HEADER, render_report, write_report
from conftest import FIXED_TIME


def failure(tx_hash, gas=None):
    return FailureItem(address="0xA", hash=tx_hash, block_number="7", target="0xpool",
                       status=TxStatus.FAILED, gas=gas or GasLookup.disabled(), method="claim()")


def test_empty_report_has_success_sentence_and_no_table():
    body = render_report([], FIXED_TIME)
    assert "Generated at: 2026-01-02T03:04:05+00:00" in body
    assert SUCCESS_SENTENCE in body
    assert TABLE_HEADER not in body


def test_report_table_rows():
    body = render_report([failure("0x1", GasLookup.found(30000)), failure("0x2")], FIXED_TIME,
                         addresses_scanned=1, interactions_checked=4)
    assert "Found 2 failed contract interaction(s)." in body
    assert "Addresses scanned: 1" in body
    assert "Interactions checked: 4" in body
    assert "| 0xA | 0x1 | 7 | 0xpool | claim() | FAILED | 30000 |" in body
    assert "| 0xA | 0x2 | 7 | 0xpool | claim() | FAILED | N/A |" in body
    assert SUCCESS_SENTENCE not in body


def test_report_is_deterministic_apart_from_timestamp():
    items = [failure("0x1"), failure("0x2")]
    first = render_report(items, FIXED_TIME)
    second = render_report(items, datetime(2030, 5, 5, tzinfo=timezone.utc))
    assert first == render_report(items, FIXED_TIME)
    assert first.splitlines()[3:] == second.splitlines()[3:]


def test_report_lists_fetch_errors():
    body = render_report([], FIXED_TIME, fetch_errors={"0xB": "NOTOK"})
    assert "## Fetch errors" in body
    assert "- 0xB: NOTOK" in body


def test_write_report_creates_directories(tmp_path):
    path = write_report(str(tmp_path / "out" / "report.md"), "body\n")
    assert path.read_text(encoding="utf-8") == "body\n"
