"""
Data model for transactions, lookups and failure items
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from config import GAS_PLACEHOLDER


class TxStatus(Enum):
    OK = 'OK'
    FAILED = 'FAILED'


def _text(record: Dict, key: str) -> str:
    # Some indexers send flags as ints; only a missing/null field is empty
    value = record.get(key)
    return '' if value is None else str(value)


@dataclass(frozen=True)
class Transaction:
    """A transaction record as returned by the explorer's txlist action"""
    hash: str
    block_number: str = ''
    from_address: str = ''
    to: str = ''
    input: str = ''
    is_error: str = ''
    receipt_status: str = ''
    gas_used: str = ''
    timestamp: str = ''

    @classmethod
    def from_api(cls, record: Dict) -> 'Transaction':
        """
        Build a Transaction from a raw explorer record

        Raises:
            TypeError: if the record is not a dict
            KeyError: if the record has no hash
        """
        if not isinstance(record, dict):
            raise TypeError(f"Expected transaction record dict, got {type(record).__name__}")

        return cls(
            hash=record['hash'],
            block_number=_text(record, 'blockNumber'),
            from_address=_text(record, 'from'),
            to=_text(record, 'to'),
            input=_text(record, 'input'),
            is_error=_text(record, 'isError'),
            receipt_status=_text(record, 'txreceipt_status'),
            gas_used=_text(record, 'gasUsed'),
            timestamp=_text(record, 'timeStamp'),
        )


@dataclass(frozen=True)
class GasLookup:
    """Outcome of a receipt lookup: a value, or why there is none"""
    FOUND = 'found'
    DISABLED = 'disabled'
    ERROR = 'error'

    state: str
    value: Optional[int] = None

    @classmethod
    def found(cls, value: int) -> 'GasLookup':
        return cls(cls.FOUND, value)

    @classmethod
    def disabled(cls) -> 'GasLookup':
        return cls(cls.DISABLED)

    @classmethod
    def error(cls) -> 'GasLookup':
        return cls(cls.ERROR)

    def display(self) -> str:
        return str(self.value) if self.state == self.FOUND else GAS_PLACEHOLDER


@dataclass(frozen=True)
class FailureItem:
    address: str
    hash: str
    block_number: str
    target: str
    status: TxStatus
    gas: GasLookup
    method: str = ''


@dataclass
class AddressFetch:
    """Transactions fetched for one address; error is set when the explorer refused"""
    address: str
    transactions: List[Transaction] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
