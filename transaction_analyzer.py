"""
Transaction analyzer - picks out contract interactions and classifies failures
"""
import logging
from typing import Iterable, List

from config import EMPTY_CALLDATA
from models import FailureItem, GasLookup, Transaction, TxStatus

logger = logging.getLogger(__name__)

# Common function selectors, used to label failed calls in reports
KNOWN_SELECTORS = {
    '0xa9059cbb': 'transfer(address,uint256)',
    '0x23b872dd': 'transferFrom(address,address,uint256)',
    '0x095ea7b3': 'approve(address,uint256)',
    '0x42842e0e': 'safeTransferFrom(address,address,uint256)',
    '0xa22cb465': 'setApprovalForAll(address,bool)',
    '0x38ed1739': 'swapExactTokensForTokens',
    '0x8803dbee': 'swapTokensForExactTokens',
    '0x7ff36ab5': 'swapExactETHForTokens',
    '0xfb3bdb41': 'swapETHForExactTokens',
    '0x18cbafe5': 'swapExactTokensForETH',
    '0x4a25d94a': 'swapTokensForExactETH',
    '0xe8e33700': 'addLiquidity',
    '0x02751cec': 'removeLiquidity',
    '0x3593564c': 'execute(bytes,bytes[],uint256)',
    '0xac9650d8': 'multicall(bytes[])',
    '0xd0e30db0': 'deposit()',
    '0x2e1a7d4d': 'withdraw(uint256)',
    '0xa694fc3a': 'stake(uint256)',
    '0x1249c58b': 'mint()',
    '0x4e71d92d': 'claim()',
}


def is_interaction(tx: Transaction) -> bool:
    """A transaction with real call data invoked contract code"""
    return bool(tx.input) and tx.input != EMPTY_CALLDATA


def filter_interactions(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Keep contract interactions, dropping plain value transfers"""
    return [tx for tx in transactions if is_interaction(tx)]


def classify(tx: Transaction) -> TxStatus:
    """
    Classify an interaction from the explorer's status flags

    isError and txreceipt_status are redundant signals; either one marking
    failure is enough.
    """
    if tx.is_error == '1' or tx.receipt_status == '0':
        return TxStatus.FAILED
    return TxStatus.OK


def method_selector(tx: Transaction) -> str:
    if len(tx.input) < 10:
        return ''
    return tx.input[:10].lower()


def method_label(tx: Transaction) -> str:
    """Human readable name of the called function, or its raw selector"""
    selector = method_selector(tx)
    return KNOWN_SELECTORS.get(selector, selector)


def build_failure_item(address: str, tx: Transaction, gas: GasLookup) -> FailureItem:
    return FailureItem(
        address=address,
        hash=tx.hash,
        block_number=tx.block_number,
        target=tx.to,
        status=TxStatus.FAILED,
        gas=gas,
        method=method_label(tx),
    )


def format_transaction_row(address: str, tx: Transaction, status: TxStatus) -> str:
    """One console line per processed interaction"""
    return (f"[{address}] block {tx.block_number or '?'} | {tx.hash} | "
            f"to {tx.to or '-'} | {method_label(tx) or '-'} | {status.value}")
