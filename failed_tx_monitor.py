"""
Failed transaction monitor entry point
"""
import logging
import sys
from typing import Mapping, Optional

from config import LOG_FILE, ConfigError, load_config
from monitor import ROW_LOGGER_NAME, FailedTxMonitor

logger = logging.getLogger(__name__)


def setup_logging(level: str, log_file: str = LOG_FILE):
    """Log to file and stdout; transaction rows always reach the console"""
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )
    # web3/urllib3 are chatty at DEBUG
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('web3').setLevel(logging.WARNING)
    logging.getLogger(ROW_LOGGER_NAME).setLevel(min(logging.INFO, getattr(logging, level)))


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    """Main entry point; returns the process exit code"""
    try:
        config = load_config(environ)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)

    try:
        result = FailedTxMonitor(config).run()
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    print(f"Report saved to {result.report_path} "
          f"({len(result.failures)} failure(s) across {result.addresses_scanned} address(es))")
    return 0


if __name__ == "__main__":
    sys.exit(main())
