"""
Navigation tools for browser automation.

Provides:
- navigate: Navigate the shared page to a URL
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import SmartToolError
from .types import NavigateOptions

if TYPE_CHECKING:
    from ..session import SessionManager


async def navigate(sessions: SessionManager, url: str, timeout: int | None = None) -> str:
    """Navigate to a URL and wait for the load event.

    Args:
        sessions: Shared session manager
        url: URL to navigate to
        timeout: Navigation timeout in milliseconds (default: config, 20000)

    Returns:
        Confirmation text naming the URL

    Raises:
        SmartToolError: If the URL is empty or navigation fails. The session stays open.
    """
    opts = NavigateOptions(url=url, timeout=sessions.config.nav_timeout_ms if timeout is None else timeout)

    page = await sessions.acquire_page()
    try:
        await page.goto(opts.url, timeout=opts.timeout, wait_until="load")
    except Exception as e:
        raise SmartToolError(
            tool="navigate",
            action="navigate",
            reason=str(e),
            suggestion="Check URL is valid and accessible, or raise the timeout",
            details={"url": opts.url, "timeout": opts.timeout},
        ) from e

    return "Navigated to " + opts.url
