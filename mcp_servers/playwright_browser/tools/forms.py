"""
Form interaction tools for browser automation.

Provides:
- fill: Set the value of an input field
- select: Select an option in a <select> element
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import FillOptions

if TYPE_CHECKING:
    from ..session import SessionManager


async def fill(sessions: SessionManager, selector: str, value: str) -> str:
    """Wait for the input to exist, then set its value."""
    opts = FillOptions(selector=selector, value=value, tool="fill")
    page = await sessions.acquire_page()
    await page.wait_for_selector(opts.selector)
    await page.fill(opts.selector, opts.value)
    return "Filled " + opts.selector + " with: " + opts.value


async def select(sessions: SessionManager, selector: str, value: str) -> str:
    """Wait for the <select> to exist, then choose the option with the given value."""
    opts = FillOptions(selector=selector, value=value, tool="select")
    page = await sessions.acquire_page()
    await page.wait_for_selector(opts.selector)
    await page.select_option(opts.selector, opts.value)
    return "Selected " + opts.selector + " with: " + opts.value
