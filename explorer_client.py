"""
Etherscan-compatible explorer API client for fetching transaction lists
"""
import requests
import logging
from typing import Optional

from config import DEFAULT_EXPLORER_API_URL, REQUEST_TIMEOUT
from models import AddressFetch, Transaction

logger = logging.getLogger(__name__)


class ExplorerClient:
    def __init__(self, api_key: str, api_url: str = DEFAULT_EXPLORER_API_URL,
                 chain_id: Optional[str] = None, timeout: int = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.api_url = api_url
        self.chain_id = chain_id
        self.timeout = timeout
        self.session = session or requests.Session()

    def _build_params(self, address: str, limit: int) -> dict:
        params = {
            'module': 'account',
            'action': 'txlist',
            'address': address,
            'startblock': 0,
            'endblock': 99999999,
            'page': 1,
            'offset': limit,
            'sort': 'desc',
            'apikey': self.api_key,
        }
        if self.chain_id:
            params['chainid'] = self.chain_id
        return params

    def get_transactions(self, address: str, limit: int) -> AddressFetch:
        """
        Get the most recent transactions of an address, newest first

        Args:
            address: The account to query
            limit: Maximum number of transactions (single page)

        Returns:
            AddressFetch with parsed transactions, or with error set and no
            transactions when the explorer answered without a result list

        Raises:
            requests.exceptions.RequestException: on network errors, timeouts
                and HTTP error statuses
        """
        response = self.session.get(self.api_url, params=self._build_params(address, limit),
                                    timeout=self.timeout)
        response.raise_for_status()
        data = response.json()

        result = data.get('result')
        if data.get('status') != '1' and not isinstance(result, list):
            error = data.get('message') or 'NOTOK'
            if isinstance(result, str) and result:
                error = f"{error}: {result}"
            logger.warning(f"[{address}] Explorer returned no transactions: {error}")
            return AddressFetch(address=address, error=error)

        if not isinstance(result, list):
            raise ValueError(f"[{address}] Unexpected explorer result type {type(result).__name__}")

        transactions = [Transaction.from_api(record) for record in result]
        logger.info(f"[{address}] Fetched {len(transactions)} transaction(s)")
        return AddressFetch(address=address, transactions=transactions)
