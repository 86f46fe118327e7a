"""
Failed transaction monitoring run: fetch, filter, classify, enrich, report, alert
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, List, Optional

from config import MonitorConfig
from explorer_client import ExplorerClient
from receipt_client import ReceiptClient
from alert_dispatcher import AlertDispatcher
from models import FailureItem, GasLookup, TxStatus
from report import render_report, write_report
from transaction_analyzer import (
    build_failure_item, classify, filter_interactions, format_transaction_row
)

logger = logging.getLogger(__name__)

# Per-transaction console rows; kept at INFO whatever LOG_LEVEL says
ROW_LOGGER_NAME = 'monitor.rows'
row_logger = logging.getLogger(ROW_LOGGER_NAME)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RunResult:
    failures: List[FailureItem] = field(default_factory=list)
    addresses_scanned: int = 0
    interactions_checked: int = 0
    fetch_errors: Dict[str, str] = field(default_factory=dict)
    report_path: Optional[Path] = None
    alert_sent: bool = False


class FailedTxMonitor:
    def __init__(self, config: MonitorConfig,
                 explorer: Optional[ExplorerClient] = None,
                 receipts: Optional[ReceiptClient] = None,
                 dispatcher: Optional[AlertDispatcher] = None,
                 clock: Callable[[], datetime] = utc_now):
        logger.info("Initializing Failed Transaction Monitor")

        self.config = config
        self.explorer = explorer or ExplorerClient(
            config.api_key, config.explorer_url, chain_id=config.chain_id
        )

        if receipts is None and config.enrichment_enabled:
            receipts = ReceiptClient(config.rpc_url)
        self.receipts = receipts

        if dispatcher is None and config.alerting_enabled:
            dispatcher = AlertDispatcher(config.webhook_url)
        self.dispatcher = dispatcher

        self.clock = clock

        if not self.receipts:
            logger.info("RPC_URL not set, gas enrichment disabled")
        if not self.dispatcher:
            logger.info("WEBHOOK_URL not set, alerting disabled")

    def lookup_gas(self, tx_hash: str) -> GasLookup:
        if not self.receipts:
            return GasLookup.disabled()
        return self.receipts.get_gas_used(tx_hash)

    def process_address(self, address: str, result: RunResult):
        """Fetch one address and append its failed interactions to result"""
        fetch = self.explorer.get_transactions(address, self.config.tx_limit)
        result.addresses_scanned += 1
        if not fetch.ok:
            result.fetch_errors[address] = fetch.error
            return

        interactions = filter_interactions(fetch.transactions)
        result.interactions_checked += len(interactions)
        logger.info(f"[{address}] {len(interactions)} contract interaction(s) "
                    f"out of {len(fetch.transactions)} transaction(s)")

        for tx in interactions:
            status = classify(tx)
            row_logger.info(format_transaction_row(address, tx, status))
            if status is TxStatus.FAILED:
                result.failures.append(build_failure_item(address, tx, self.lookup_gas(tx.hash)))

    def run(self) -> RunResult:
        """Run one pass over all configured addresses, in order"""
        result = RunResult()

        for address in self.config.addresses:
            self.process_address(address, result)

        logger.info(f"Scanned {result.addresses_scanned} address(es), "
                    f"{result.interactions_checked} interaction(s), "
                    f"{len(result.failures)} failure(s)")

        body = render_report(
            result.failures,
            self.clock(),
            addresses_scanned=result.addresses_scanned,
            interactions_checked=result.interactions_checked,
            fetch_errors=result.fetch_errors,
        )
        result.report_path = write_report(self.config.report_path, body)

        if self.dispatcher:
            result.alert_sent = self.dispatcher.dispatch(result.failures)

        return result
