from __future__ import annotations

import logging
from typing import Any

from .config import PlaywrightConfig

logger = logging.getLogger("mcp.playwright.launcher")


class BrowserLauncher:
    """Creates the three parts of a browser session through Playwright's async API."""

    def __init__(self, config: PlaywrightConfig | None = None) -> None:
        self.config = config or PlaywrightConfig.from_env()

    async def start_engine(self) -> Any:
        from playwright.async_api import async_playwright

        return await async_playwright().start()

    async def launch_browser(self, engine: Any) -> Any:
        browser_type = getattr(engine, self.config.browser_type)
        options: dict[str, Any] = {"headless": self.config.headless}
        if self.config.extra_flags:
            options["args"] = list(self.config.extra_flags)
        if self.config.slow_mo:
            options["slow_mo"] = self.config.slow_mo
        logger.info("launching %s headless=%s", self.config.browser_type, self.config.headless)
        return await browser_type.launch(**options)

    async def open_page(self, browser: Any) -> Any:
        if self.config.viewport:
            return await browser.new_page(viewport=self.config.viewport)
        return await browser.new_page()
