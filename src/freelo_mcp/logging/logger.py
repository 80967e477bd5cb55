"""Logging configuration. Outputs to stderr; stdout carries the MCP stdio transport."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logger(name: str = "freelo_mcp", level: str = "INFO") -> logging.Logger:
    """Configure the package logger to write to stderr.

    Calling it again only updates the level. httpx's own per-request INFO
    lines are silenced since the client logs every request itself.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
