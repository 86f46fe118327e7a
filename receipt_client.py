"""
JSON-RPC receipt lookups for gas enrichment
"""
import logging
from typing import Optional

from web3 import Web3

from config import REQUEST_TIMEOUT
from models import GasLookup

logger = logging.getLogger(__name__)


class ReceiptClient:
    def __init__(self, rpc_url: str, timeout: int = REQUEST_TIMEOUT, w3: Optional[Web3] = None):
        self.rpc_url = rpc_url
        self.w3 = w3 or Web3(Web3.HTTPProvider(rpc_url, request_kwargs={'timeout': timeout}))

    def get_gas_used(self, tx_hash: str) -> GasLookup:
        """
        Look up the gas actually consumed by a transaction

        Never raises: an unmined transaction, a node error or a network
        failure all yield GasLookup.error().
        """
        try:
            receipt = self.w3.eth.get_transaction_receipt(tx_hash)
            gas_used = receipt['gasUsed']
        except Exception as e:
            logger.debug(f"Failed to get receipt for {tx_hash} from {self.rpc_url}: {e}")
            return GasLookup.error()

        if gas_used is None:
            return GasLookup.error()
        return GasLookup.found(int(gas_used))
