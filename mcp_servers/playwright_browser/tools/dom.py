"""
DOM tools for browser automation.

Provides:
- screenshot: Capture the page or a single element to a file
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .types import ScreenshotOptions

if TYPE_CHECKING:
    from ..session import SessionManager

logger = logging.getLogger("mcp.playwright.tools")


async def screenshot(
    sessions: SessionManager,
    name: str,
    selector: str | None = None,
    full_page: bool = False,
    save_png: bool = False,
    downloads_dir: str | None = None,
) -> str:
    """Save a screenshot of the page (or of one element) as JPEG or PNG.

    The file is written to `<downloads_dir>/<name>-<timestamp>.<jpg|png>`; the
    directory is created if needed. A selector that matches nothing is
    reported as text, not raised.
    """
    opts = ScreenshotOptions(
        name=name,
        selector=selector or None,
        full_page=full_page,
        save_png=save_png,
        downloads_dir=downloads_dir or None,
    )

    page = await sessions.acquire_page()

    directory = opts.directory(sessions.config.screenshot_dir)
    directory.mkdir(parents=True, exist_ok=True)
    file_path = str(opts.target_path(sessions.config.screenshot_dir))

    if opts.selector:
        element = await page.query_selector(opts.selector)
        if element is None:
            logger.info("screenshot element not found: %s", opts.selector)
            return f"Element not found: {opts.selector}"

        await element.scroll_into_view_if_needed()
        await element.screenshot(path=file_path, type=opts.image_type)
    else:
        await page.screenshot(path=file_path, full_page=opts.full_page, type=opts.image_type)

    return "Screenshot saved to " + file_path
