"""Tool contract definitions.

Single source of truth for the server identity and the tool names and
descriptions advertised to MCP clients.
"""

from __future__ import annotations

SERVER_INFO: dict[str, str] = {"name": "playwright", "version": "0.1.0"}

INSTRUCTIONS = (
    "Browser automation over one shared Playwright page. The browser starts on the first tool call "
    "and stays open until playwright_close."
)


class ToolNames:
    NAVIGATE = "playwright_navigate"
    SCREENSHOT = "playwright_screenshot"
    CLICK = "playwright_click"
    IFRAME_CLICK = "playwright_iframe_click"
    FILL = "playwright_fill"
    SELECT = "playwright_select"
    HOVER = "playwright_hover"
    EVALUATE = "playwright_evaluate"
    CLOSE = "playwright_close"


TOOL_DESCRIPTIONS: dict[str, str] = {
    ToolNames.NAVIGATE: "Navigate to a URL and wait for the page to load",
    ToolNames.SCREENSHOT: "Take a screenshot of the current page or a specific element",
    ToolNames.CLICK: "Click an element on the page",
    ToolNames.IFRAME_CLICK: "Click an element in an iframe on the page",
    ToolNames.FILL: "Fill an input field with a given value",
    ToolNames.SELECT: "Select an element on the page with Select tag",
    ToolNames.HOVER: "Hover an element on the page",
    ToolNames.EVALUATE: "Execute JavaScript in the browser console",
    ToolNames.CLOSE: "Close the browser and release all resources",
}

TOOL_NAMES: list[str] = list(TOOL_DESCRIPTIONS)
