"""
PR Inbox command line entry point.

Reads ME, TOKEN, OWNER and REPO (or the YAML file named by
PR_INBOX_CONFIG), prints the report and exits.
"""

import logging
import sys
from typing import Dict, Optional

from .api import PRInboxAPI
from .config import load_config, setup_logging
from .formatting.console import ConsoleReportFormatter
from .github.client import FetchFailure


logger = logging.getLogger(__name__)


def main(environ: Optional[Dict[str, str]] = None) -> int:
    """Run the inbox once and return the process exit code."""
    try:
        config = load_config(environ)
        config.validate()
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(config.logging)

    api = PRInboxAPI(config)
    try:
        report = api.run()
    except FetchFailure as e:
        logger.error(f"Fetch failed for {config.repository.full_name}: {e}")
        print(f"Failed to fetch pull requests: {e}", file=sys.stderr)
        return 1
    finally:
        api.close()

    formatter = ConsoleReportFormatter(snippet_length=config.inbox.snippet_length)
    sys.stdout.write(formatter.render(report))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
