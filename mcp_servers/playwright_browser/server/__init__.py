"""Server package for the Playwright MCP server.

Keep this package import light: importing `mcp_servers.playwright_browser.server.*`
should not eagerly pull the MCP SDK (contract and redaction are used without it).
"""

from __future__ import annotations

from typing import Any

__all__ = ["create_app"]


def __getattr__(name: str) -> Any:  # pragma: no cover
    if name == "create_app":
        from .app import create_app

        return create_app
    raise AttributeError(name)
