"""
Markdown report of failed contract interactions
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Sequence

from models import FailureItem

logger = logging.getLogger(__name__)

REPORT_TITLE = '# Failed Transaction Report'
SUCCESS_SENTENCE = 'No failed contract interactions found.'
TABLE_HEADER = '| Address | Tx Hash | Block | Target | Method | Status | Gas Used |'
TABLE_DIVIDER = '|---|---|---|---|---|---|---|'


def _cell(value: str) -> str:
    return (value or '-').replace('|', '\\|')


def format_failure_row(item: FailureItem) -> str:
    cells = [item.address, item.hash, item.block_number, item.target,
             item.method, item.status.value, item.gas.display()]
    return '| ' + ' | '.join(_cell(c) for c in cells) + ' |'


def render_report(failures: Sequence[FailureItem], generated_at: datetime,
                  addresses_scanned: Optional[int] = None,
                  interactions_checked: Optional[int] = None,
                  fetch_errors: Optional[Dict[str, str]] = None) -> str:
    """
    Render the report body

    Output depends only on the arguments; generated_at is the sole
    time-varying input.
    """
    lines = [REPORT_TITLE, '', f"Generated at: {generated_at.isoformat()}", '']

    if addresses_scanned is not None:
        lines.append(f"Addresses scanned: {addresses_scanned}")
    if interactions_checked is not None:
        lines.append(f"Interactions checked: {interactions_checked}")
    if addresses_scanned is not None or interactions_checked is not None:
        lines.append('')

    if not failures:
        lines.append(SUCCESS_SENTENCE)
    else:
        lines.append(f"Found {len(failures)} failed contract interaction(s).")
        lines.append('')
        lines.append(TABLE_HEADER)
        lines.append(TABLE_DIVIDER)
        lines.extend(format_failure_row(item) for item in failures)

    if fetch_errors:
        lines.extend(['', '## Fetch errors', ''])
        for address, error in fetch_errors.items():
            lines.append(f"- {address}: {error}")

    return '\n'.join(lines) + '\n'


def write_report(path: str, body: str) -> Path:
    report_path = Path(path)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(body, encoding='utf-8')
    logger.info(f"Report written to {report_path}")
    return report_path
