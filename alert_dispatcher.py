"""
Webhook alerts for failed contract interactions
"""
import requests
import logging
from typing import Optional, Sequence
from urllib.parse import urlparse

from config import ALERT_MAX_ITEMS, REQUEST_TIMEOUT
from models import FailureItem

logger = logging.getLogger(__name__)

DISCORD_HOSTS = ('discord.com', 'discordapp.com')


def build_alert_message(failures: Sequence[FailureItem], max_items: int = ALERT_MAX_ITEMS) -> str:
    """Total count followed by the first max_items failures, one per line"""
    lines = [f"Found {len(failures)} failed contract interaction(s)"]
    for item in failures[:max_items]:
        lines.append(f"- {item.address} / {item.hash} / block {item.block_number or '?'}")
    remaining = len(failures) - max_items
    if remaining > 0:
        lines.append(f"... and {remaining} more")
    return '\n'.join(lines)


class AlertDispatcher:
    def __init__(self, webhook_url: str, timeout: int = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def _payload(self, message: str) -> dict:
        # Discord webhooks read "content"; Slack and most others read "text"
        host = (urlparse(self.webhook_url).hostname or '').lower()
        if host.endswith(DISCORD_HOSTS):
            return {'content': message}
        return {'text': message}

    def dispatch(self, failures: Sequence[FailureItem]) -> bool:
        """
        Post a condensed failure summary to the webhook

        Returns:
            True if an alert was delivered, False if there was nothing to
            send or delivery failed
        """
        if not failures:
            logger.debug("No failures, skipping alert")
            return False

        message = build_alert_message(failures)
        try:
            response = self.session.post(self.webhook_url, json=self._payload(message),
                                         timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Webhook delivery failed: {e}")
            return False

        logger.info(f"Alert sent for {len(failures)} failure(s)")
        return True
