from datetime import datetime, timezone

import pytest
import requests

from config import MonitorConfig

FIXED_TIME = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_record(tx_hash, input_data="0xa9059cbb0000", is_error="0", receipt_status="1",
                block="100", to="0xcontract"):
    return {
        "hash": tx_hash,
        "blockNumber": block,
        "from": "0xsender",
        "to": to,
        "input": input_data,
        "isError": is_error,
        "txreceipt_status": receipt_status,
        "gasUsed": "21000",
        "timeStamp": "1700000000",
    }


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for requests.Session; answers GETs by address, records POSTs"""

    def __init__(self, responses=None, post_response=None, post_error=None):
        self.responses = responses or {}
        self.post_response = post_response or FakeResponse({"ok": True})
        self.post_error = post_error
        self.get_calls = []
        self.post_calls = []

    def get(self, url, params=None, timeout=None):
        self.get_calls.append({"url": url, "params": params, "timeout": timeout})
        answer = self.responses[params["address"]]
        if isinstance(answer, Exception):
            raise answer
        return answer

    def post(self, url, json=None, timeout=None):
        self.post_calls.append({"url": url, "json": json, "timeout": timeout})
        if self.post_error:
            raise self.post_error
        return self.post_response


class FakeReceipts:
    def __init__(self, gas_by_hash=None):
        self.gas_by_hash = gas_by_hash or {}
        self.calls = []

    def get_gas_used(self, tx_hash):
        from models import GasLookup

        self.calls.append(tx_hash)
        if tx_hash in self.gas_by_hash:
            return GasLookup.found(self.gas_by_hash[tx_hash])
        return GasLookup.error()


@pytest.fixture()
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture()
def make_config(tmp_path):
    def _make(addresses=("0xA",), **overrides):
        values = dict(
            api_key="test-key",
            addresses=tuple(addresses),
            report_path=str(tmp_path / "reports" / "report.md"),
        )
        values.update(overrides)
        return MonitorConfig(**values)

    return _make
