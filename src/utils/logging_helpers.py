"""
Logging helper utilities for the report CLI.

Provides logging setup and consistent formatting for error blocks and
informational headers.
"""

import logging
from typing import List, Optional


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def log_error_section(
    title: str,
    messages: List[str],
    logger: Optional[logging.Logger] = None,
    width: int = 60
) -> None:
    """
    Log an error block framed by separator lines.

    Args:
        title: First line of the block
        messages: Further lines (empty strings become blank lines)
        logger: Logger instance (defaults to root logger if not provided)
        width: Width of separator line in characters

    Examples:
        >>> log_error_section(
        ...     "DOCKER_TOKEN environment variable not set.",
        ...     ["Export a Docker personal access token as DOCKER_TOKEN"]
        ... )
        ============================================================
        DOCKER_TOKEN environment variable not set.
        Export a Docker personal access token as DOCKER_TOKEN
        ============================================================
    """
    logger = logger or logging.getLogger()

    logger.error("=" * width)
    logger.error(title)
    for message in messages:
        logger.error(message or "")
    logger.error("=" * width)


def log_info_header(
    message: str,
    logger: Optional[logging.Logger] = None,
    width: int = 60,
    char: str = "="
) -> None:
    """Log an informational header between separator lines."""
    logger = logger or logging.getLogger()

    logger.info(char * width)
    logger.info(message)
    logger.info(char * width)
