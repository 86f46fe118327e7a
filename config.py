"""
Configuration for Failed Transaction Monitor
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

# Etherscan-compatible explorer API
DEFAULT_EXPLORER_API_URL = 'https://api.etherscan.io/api'

# Request Configuration
REQUEST_TIMEOUT = 20  # seconds, bounded wait for explorer/RPC/webhook calls
DEFAULT_TX_LIMIT = 50  # most recent transactions fetched per address

# Call data of a plain value transfer
EMPTY_CALLDATA = '0x'

# Report Configuration
DEFAULT_REPORT_PATH = 'reports/failed_tx_report.md'
GAS_PLACEHOLDER = 'N/A'

# Alert Configuration
ALERT_MAX_ITEMS = 5  # failures itemized in a webhook message

# Logging Configuration
LOG_FILE = 'failed_tx_monitor.log'
DEFAULT_LOG_LEVEL = 'INFO'


class ConfigError(ValueError):
    """Raised when a required setting is missing or invalid"""


@dataclass(frozen=True)
class MonitorConfig:
    api_key: str
    addresses: Tuple[str, ...]
    tx_limit: int = DEFAULT_TX_LIMIT
    rpc_url: Optional[str] = None
    webhook_url: Optional[str] = None
    explorer_url: str = DEFAULT_EXPLORER_API_URL
    chain_id: Optional[str] = None
    report_path: str = DEFAULT_REPORT_PATH
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def enrichment_enabled(self) -> bool:
        return bool(self.rpc_url)

    @property
    def alerting_enabled(self) -> bool:
        return bool(self.webhook_url)


def parse_addresses(raw: str) -> Tuple[str, ...]:
    """Split a comma-separated address list, dropping blanks"""
    return tuple(part.strip() for part in raw.split(',') if part.strip())


def _optional(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(key, '').strip()
    return value or None


def load_config(environ: Optional[Mapping[str, str]] = None) -> MonitorConfig:
    """
    Build the run configuration from environment variables

    Args:
        environ: Mapping to read from. Defaults to os.environ after loading
            a .env file from the working directory, if one exists.

    Raises:
        ConfigError: if ETHERSCAN_API_KEY or ADDRESSES is missing, or a
            numeric/level setting is invalid
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = environ.get('ETHERSCAN_API_KEY', '').strip()
    if not api_key:
        raise ConfigError("ETHERSCAN_API_KEY not configured")

    addresses = parse_addresses(environ.get('ADDRESSES', ''))
    if not addresses:
        raise ConfigError("ADDRESSES not configured (comma-separated list expected)")

    raw_limit = environ.get('TX_LIMIT', '').strip()
    if raw_limit:
        try:
            tx_limit = int(raw_limit)
        except ValueError:
            raise ConfigError(f"TX_LIMIT must be an integer, got {raw_limit!r}") from None
        if tx_limit <= 0:
            raise ConfigError(f"TX_LIMIT must be positive, got {tx_limit}")
    else:
        tx_limit = DEFAULT_TX_LIMIT

    log_level = environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
    if log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        raise ConfigError(f"LOG_LEVEL {log_level!r} is not a valid logging level")

    return MonitorConfig(
        api_key=api_key,
        addresses=addresses,
        tx_limit=tx_limit,
        rpc_url=_optional(environ, 'RPC_URL'),
        webhook_url=_optional(environ, 'WEBHOOK_URL'),
        explorer_url=_optional(environ, 'EXPLORER_API_URL') or DEFAULT_EXPLORER_API_URL,
        chain_id=_optional(environ, 'CHAIN_ID'),
        report_path=_optional(environ, 'REPORT_PATH') or DEFAULT_REPORT_PATH,
        log_level=log_level,
    )
