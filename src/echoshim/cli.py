"""Command-line entry point for the responder.

There are no flags: behavior is driven entirely by stdin. Logging goes to
stderr so stdout carries nothing but the single JSON response line.

Environment:
    ECHOSHIM_LOG_LEVEL: Log level name for stderr logging (default: WARNING)
"""

import logging
import os
import sys
from typing import List, Optional

from echoshim.core.exceptions import EchoShimError
from echoshim.core.responder import Responder

LOG_LEVEL_ENV = "ECHOSHIM_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send log records to stderr at the level named by ECHOSHIM_LOG_LEVEL."""
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Answer one request from stdin.

    Args:
        argv: Ignored; accepted so the function can be used as a console script

    Returns:
        0 on success, 1 on any read, parse or serialize failure
    """
    configure_logging()

    try:
        Responder().run(sys.stdin.buffer, sys.stdout.buffer)
    except EchoShimError as e:
        logger.debug("Request failed", exc_info=True)
        sys.stderr.write(f"Error: {e}\n")
        return 1

    return 0
