"""
Pointer tools for browser automation.

Provides:
- click: Click an element on the page
- iframe_click: Click an element inside an iframe
- hover: Hover an element
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import SmartToolError
from .types import IframeClickOptions, SelectorOptions

if TYPE_CHECKING:
    from ..session import SessionManager


async def click(sessions: SessionManager, selector: str) -> str:
    opts = SelectorOptions(selector=selector, tool="click")
    page = await sessions.acquire_page()
    await page.click(opts.selector)
    return "Clicked element: " + opts.selector


async def iframe_click(sessions: SessionManager, selector: str, iframe_selector: str) -> str:
    """Click `selector` inside the iframe matched by `iframe_selector`.

    The iframe is waited for with the engine's default timeout, so frames
    attached after the call starts are still found.

    Raises:
        SmartToolError: If no iframe matches (this is not reported as text).
    """
    opts = IframeClickOptions(selector=selector, iframe_selector=iframe_selector)
    page = await sessions.acquire_page()

    not_found = SmartToolError(
        tool="iframe_click",
        action="locate_iframe",
        reason=f"Iframe not found: {opts.iframe_selector}",
        suggestion="Check the iframe selector matches an <iframe> or <frame> element",
        details={"iframe_selector": opts.iframe_selector},
    )
    try:
        frame_element = await page.wait_for_selector(opts.iframe_selector)
    except Exception as e:
        raise not_found from e

    frame = await frame_element.content_frame() if frame_element is not None else None
    if frame is None:
        raise not_found

    await page.frame_locator(opts.iframe_selector).locator(opts.selector).click()
    return "Clicked element: " + opts.selector + " in iframe: " + opts.iframe_selector


async def hover(sessions: SessionManager, selector: str) -> str:
    opts = SelectorOptions(selector=selector, tool="hover")
    page = await sessions.acquire_page()
    await page.wait_for_selector(opts.selector)
    await page.hover(opts.selector)
    return "Hovered " + opts.selector
