"""
MCP application: one FastMCP tool per automation verb.

The transport (stdio JSON-RPC, schema generation, error responses) belongs to
FastMCP. Every tool here logs the call, then delegates to the matching
handler in `tools/` with the injected SessionManager.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from .. import tools
from ..session import SessionManager
from .contract import INSTRUCTIONS, SERVER_INFO, TOOL_DESCRIPTIONS, ToolNames
from .redaction import redact_tool_arguments

logger = logging.getLogger("mcp.playwright.server")


def _log_call(name: str, arguments: dict[str, Any], *, trace: bool = False) -> None:
    """Log tool call with sanitized arguments (INFO when MCP_TRACE is set, else DEBUG)."""
    safe_args = redact_tool_arguments(name, arguments)
    logger.log(logging.INFO if trace else logging.DEBUG, "tool=%s args=%s", name, safe_args)


def create_app(sessions: SessionManager) -> FastMCP:
    """Build the FastMCP server bound to `sessions`.

    The shared browser session is released when the server shuts down.
    """

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[SessionManager]:
        try:
            yield sessions
        finally:
            await sessions.release_all()

    trace = sessions.config.trace_calls
    app = FastMCP(SERVER_INFO["name"], instructions=INSTRUCTIONS, lifespan=lifespan)

    @app.tool(name=ToolNames.NAVIGATE, description=TOOL_DESCRIPTIONS[ToolNames.NAVIGATE])
    async def playwright_navigate(
        url: Annotated[str, Field(description="URL to navigate to")],
        timeout: Annotated[
            int, Field(description="Navigation timeout in milliseconds")
        ] = sessions.config.nav_timeout_ms,
    ) -> str:
        _log_call(ToolNames.NAVIGATE, {"url": url, "timeout": timeout}, trace=trace)
        return await tools.navigate(sessions, url, timeout=timeout)

    @app.tool(name=ToolNames.SCREENSHOT, description=TOOL_DESCRIPTIONS[ToolNames.SCREENSHOT])
    async def playwright_screenshot(
        name: Annotated[str, Field(description="Name for the screenshot")],
        selector: Annotated[str | None, Field(description="CSS selector for element to screenshot")] = None,
        fullPage: Annotated[bool, Field(description="Take a full page screenshot (default: false)")] = False,  # noqa: N803
        savePng: Annotated[bool, Field(description="Save the screenshot as a PNG file (default: false)")] = False,  # noqa: N803
        downloadsDir: Annotated[  # noqa: N803
            str | None, Field(description="Directory to save the screenshot (default: user's Downloads folder)")
        ] = None,
    ) -> str:
        _log_call(
            ToolNames.SCREENSHOT,
            {"name": name, "selector": selector, "fullPage": fullPage, "savePng": savePng, "downloadsDir": downloadsDir},
            trace=trace,
        )
        return await tools.screenshot(
            sessions,
            name,
            selector=selector,
            full_page=fullPage,
            save_png=savePng,
            downloads_dir=downloadsDir,
        )

    @app.tool(name=ToolNames.CLICK, description=TOOL_DESCRIPTIONS[ToolNames.CLICK])
    async def playwright_click(
        selector: Annotated[str, Field(description="CSS selector for the element to click")],
    ) -> str:
        _log_call(ToolNames.CLICK, {"selector": selector}, trace=trace)
        return await tools.click(sessions, selector)

    @app.tool(name=ToolNames.IFRAME_CLICK, description=TOOL_DESCRIPTIONS[ToolNames.IFRAME_CLICK])
    async def playwright_iframe_click(
        selector: Annotated[str, Field(description="CSS selector for the element to click")],
        iframeSelector: Annotated[  # noqa: N803
            str, Field(description="CSS selector for the iframe containing the element to click")
        ],
    ) -> str:
        _log_call(ToolNames.IFRAME_CLICK, {"selector": selector, "iframeSelector": iframeSelector}, trace=trace)
        return await tools.iframe_click(sessions, selector, iframeSelector)

    @app.tool(name=ToolNames.FILL, description=TOOL_DESCRIPTIONS[ToolNames.FILL])
    async def playwright_fill(
        selector: Annotated[str, Field(description="CSS selector for the input field to fill")],
        value: Annotated[str, Field(description="Value to fill in the input field")],
    ) -> str:
        _log_call(ToolNames.FILL, {"selector": selector, "value": value}, trace=trace)
        return await tools.fill(sessions, selector, value)

    @app.tool(name=ToolNames.SELECT, description=TOOL_DESCRIPTIONS[ToolNames.SELECT])
    async def playwright_select(
        selector: Annotated[str, Field(description="CSS selector for element to select")],
        value: Annotated[str, Field(description="Value to select")],
    ) -> str:
        _log_call(ToolNames.SELECT, {"selector": selector, "value": value}, trace=trace)
        return await tools.select(sessions, selector, value)

    @app.tool(name=ToolNames.HOVER, description=TOOL_DESCRIPTIONS[ToolNames.HOVER])
    async def playwright_hover(
        selector: Annotated[str, Field(description="CSS selector for element to hover")],
    ) -> str:
        _log_call(ToolNames.HOVER, {"selector": selector}, trace=trace)
        return await tools.hover(sessions, selector)

    @app.tool(name=ToolNames.EVALUATE, description=TOOL_DESCRIPTIONS[ToolNames.EVALUATE])
    async def playwright_evaluate(
        script: Annotated[str, Field(description="JavaScript code to execute")],
    ) -> list[str]:
        _log_call(ToolNames.EVALUATE, {"script": script}, trace=trace)
        return await tools.evaluate(sessions, script)

    @app.tool(name=ToolNames.CLOSE, description=TOOL_DESCRIPTIONS[ToolNames.CLOSE])
    async def playwright_close() -> str:
        _log_call(ToolNames.CLOSE, {}, trace=trace)
        return await tools.close(sessions)

    return app
