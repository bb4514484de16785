"""
MCP server for browser automation via Playwright.

This module provides the process entry point: logging setup, server
construction and the exit code. Tool definitions live in server/app.py.
"""

from __future__ import annotations

import logging
import sys

from .config import PlaywrightConfig
from .logging_setup import configure_logging
from .session import SessionManager

logger = logging.getLogger("mcp.playwright")

__all__ = ["main"]


def main() -> int:
    """Run the stdio MCP server. Returns the process exit code."""
    try:
        # An unusable log directory still takes the fatal path below; the
        # record then reaches stderr through logging's last-resort handler.
        config = PlaywrightConfig.from_env()
        configure_logging(config.log_dir, config.log_level)

        logger.info("Starting server...")

        from .server.app import create_app

        sessions = SessionManager(config)
        app = create_app(sessions)
        app.run(transport="stdio")

        return 0
    except Exception:
        logger.critical("Host terminated unexpectedly", exc_info=True)

        return 1
    finally:
        logging.shutdown()


if __name__ == "__main__":
    sys.exit(main())
