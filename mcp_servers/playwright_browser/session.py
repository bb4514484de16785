"""
Session management for the shared browser session.

One MCP server process drives one browser with one page. The session is
created lazily by the first tool call that needs a page and lives until an
explicit close.

Architecture:
- BrowserSession: the (engine, browser, page) triple, stored as one value
- SessionManager: owns zero or one BrowserSession, constructed once at
  startup and handed to every tool handler
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .config import PlaywrightConfig
from .launcher import BrowserLauncher

if TYPE_CHECKING:
    from .tools.types import PageLike

logger = logging.getLogger("mcp.playwright.session")

CLOSED_MESSAGE = "Browser closed successfully"


@dataclass(frozen=True, slots=True)
class BrowserSession:
    engine: Any
    browser: Any
    page: PageLike


class SessionManager:
    """
    Owner of the process-wide browser session.

    The session is stored as a single BrowserSession (or None), so engine,
    browser and page are always present together or absent together.
    Creation and teardown run under one asyncio.Lock; reuse of an existing
    page does not take the lock.
    """

    def __init__(self, config: PlaywrightConfig | None = None, launcher: BrowserLauncher | None = None) -> None:
        self.config = config or PlaywrightConfig.from_env()
        self.launcher = launcher or BrowserLauncher(self.config)
        self._session: BrowserSession | None = None
        self._lock = asyncio.Lock()

    @property
    def session(self) -> BrowserSession | None:
        return self._session

    @property
    def has_session(self) -> bool:
        return self._session is not None

    async def acquire_page(self) -> PageLike:
        """Return the active page, creating the whole session on first use."""
        session = self._session
        if session is not None:
            return session.page

        async with self._lock:
            if self._session is None:
                self._session = await self._create_session()
            return self._session.page

    async def _create_session(self) -> BrowserSession:
        engine = browser = None
        try:
            engine = await self.launcher.start_engine()
            browser = await self.launcher.launch_browser(engine)
            page = await self.launcher.open_page(browser)
        except Exception:
            logger.exception("session_create_failed")
            # Nothing partial is kept: undo whatever was already started.
            await self._teardown(engine=engine, browser=browser, page=None)
            raise
        logger.info("session_created browser=%s", self.config.browser_type)
        return BrowserSession(engine=engine, browser=browser, page=page)

    async def release_all(self) -> str:
        """Close page, browser and engine. Safe to call when nothing is open."""
        async with self._lock:
            session = self._session
            self._session = None
            if session is None:
                logger.debug("release_all: no active session")
                return CLOSED_MESSAGE
            await self._teardown(engine=session.engine, browser=session.browser, page=session.page)
            logger.info("session_closed")
        return CLOSED_MESSAGE

    async def _teardown(self, *, engine: Any, browser: Any, page: Any) -> None:
        if page is not None:
            try:
                await page.close()
            except Exception as exc:  # noqa: BLE001
                logger.warning("page_close_failed: %s", exc)

        if browser is not None:
            try:
                await browser.close()
            except Exception as exc:  # noqa: BLE001
                logger.warning("browser_close_failed: %s", exc)

        if engine is not None:
            try:
                await engine.stop()
            except Exception as exc:  # noqa: BLE001
                logger.warning("engine_stop_failed: %s", exc)
