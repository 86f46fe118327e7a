from types import SimpleNamespace

from models import GasLookup
from receipt_client import ReceiptClient


class FakeEth:
    def __init__(self, receipts):
        self.receipts = receipts

    def get_transaction_receipt(self, tx_hash):
        receipt = self.receipts[tx_hash]
        if isinstance(receipt, Exception):
            raise receipt
        return receipt


def make_client(receipts):
    return ReceiptClient("http://node.test", w3=SimpleNamespace(eth=FakeEth(receipts)))


def test_gas_used_found():
    lookup = make_client({"0x1": {"gasUsed": 48211, "status": 0}}).get_gas_used("0x1")
    assert lookup == GasLookup.found(48211)
    assert lookup.display() == "48211"


def test_lookup_errors_are_swallowed():
    client = make_client({"0x1": ValueError("node rejected request")})
    lookup = client.get_gas_used("0x1")
    assert lookup.state == GasLookup.ERROR
    assert lookup.value is None
    assert lookup.display() == "N/A"


def test_unknown_hash_is_an_error_not_disabled():
    lookup = make_client({}).get_gas_used("0xmissing")
    assert lookup.state == GasLookup.ERROR
    assert lookup != GasLookup.disabled()
