"""
Fake Playwright objects for hermetic tests.

FakeLauncher hands out FakeEngine -> FakeBrowser -> FakePage and counts every
creation, so tests can assert how many sessions were really started.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import pytest

from mcp_servers.playwright_browser.config import PlaywrightConfig
from mcp_servers.playwright_browser.session import SessionManager


class FakeElement:
    def __init__(self, *, frame: Any = None) -> None:
        self.frame = frame
        self.scrolled = False
        self.shots: list[dict[str, Any]] = []

    async def scroll_into_view_if_needed(self) -> None:
        self.scrolled = True

    async def screenshot(self, *, path: str, type: str) -> bytes:  # noqa: A002
        Path(path).write_bytes(b"element")
        self.shots.append({"path": path, "type": type})
        return b"element"

    async def content_frame(self) -> Any:
        return self.frame


class FakeLocator:
    def __init__(self, page: FakePage, iframe_selector: str, selector: str) -> None:
        self.page = page
        self.iframe_selector = iframe_selector
        self.selector = selector

    async def click(self) -> None:
        self.page.calls.append(("frame_click", self.iframe_selector, self.selector))


class FakeFrameLocator:
    def __init__(self, page: FakePage, iframe_selector: str) -> None:
        self.page = page
        self.iframe_selector = iframe_selector

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self.page, self.iframe_selector, selector)


class FakePage:
    def __init__(self, browser: FakeBrowser) -> None:
        self.browser = browser
        self.calls: list[tuple[Any, ...]] = []
        self.elements: dict[str, FakeElement] = {}
        # Attached only once something waits for them.
        self.late_elements: dict[str, FakeElement] = {}
        self.wait_error: Exception | None = None
        self.scripts: dict[str, Any] = {}
        self.goto_error: Exception | None = None
        self.close_error: Exception | None = None
        self.closed = False

    async def goto(self, url: str, *, timeout: float, wait_until: str) -> None:
        self.calls.append(("goto", url, timeout, wait_until))
        if self.goto_error is not None:
            raise self.goto_error

    async def click(self, selector: str) -> None:
        self.calls.append(("click", selector))

    async def fill(self, selector: str, value: str) -> None:
        self.calls.append(("fill", selector, value))

    async def hover(self, selector: str) -> None:
        self.calls.append(("hover", selector))

    async def select_option(self, selector: str, value: str) -> list[str]:
        self.calls.append(("select_option", selector, value))
        return [value]

    async def wait_for_selector(self, selector: str) -> FakeElement | None:
        self.calls.append(("wait_for_selector", selector))
        if self.wait_error is not None:
            raise self.wait_error
        if selector in self.late_elements:
            self.elements[selector] = self.late_elements.pop(selector)
        return self.elements.get(selector)

    async def query_selector(self, selector: str) -> FakeElement | None:
        self.calls.append(("query_selector", selector))
        return self.elements.get(selector)

    async def screenshot(self, *, path: str, full_page: bool, type: str) -> bytes:  # noqa: A002
        Path(path).write_bytes(b"page")
        self.calls.append(("screenshot", path, full_page, type))
        return b"page"

    async def evaluate(self, expression: str) -> Any:
        self.calls.append(("evaluate", expression))
        return self.scripts.get(expression)

    def frame_locator(self, selector: str) -> FakeFrameLocator:
        return FakeFrameLocator(self, selector)

    async def close(self) -> None:
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


class FakeBrowser:
    def __init__(self) -> None:
        self.pages: list[FakePage] = []
        self.closed = False

    async def new_page(self, **_kwargs: Any) -> FakePage:
        page = FakePage(self)
        self.pages.append(page)
        return page

    async def close(self) -> None:
        self.closed = True


class FakeEngine:
    def __init__(self) -> None:
        self.stopped = False

    async def stop(self) -> None:
        self.stopped = True


class FakeLauncher:
    """Launcher stand-in; `fail_at` names the step that raises ("engine", "browser", "page")."""

    def __init__(self, *, fail_at: str | None = None, delay: float = 0.0) -> None:
        self.fail_at = fail_at
        self.delay = delay
        self.engines: list[FakeEngine] = []
        self.browsers: list[FakeBrowser] = []
        self.pages: list[FakePage] = []

    async def start_engine(self) -> FakeEngine:
        await asyncio.sleep(self.delay)
        if self.fail_at == "engine":
            raise RuntimeError("engine unreachable")
        engine = FakeEngine()
        self.engines.append(engine)
        return engine

    async def launch_browser(self, engine: FakeEngine) -> FakeBrowser:
        await asyncio.sleep(self.delay)
        if self.fail_at == "browser":
            raise RuntimeError("browser failed to launch")
        browser = FakeBrowser()
        self.browsers.append(browser)
        return browser

    async def open_page(self, browser: FakeBrowser) -> FakePage:
        await asyncio.sleep(self.delay)
        if self.fail_at == "page":
            raise RuntimeError("page failed to open")
        page = await browser.new_page()
        self.pages.append(page)
        return page


@pytest.fixture
def config(tmp_path: Path) -> PlaywrightConfig:
    return PlaywrightConfig(screenshot_dir=str(tmp_path / "downloads"), log_dir=str(tmp_path / "logs"))


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def sessions(config: PlaywrightConfig, launcher: FakeLauncher) -> SessionManager:
    return SessionManager(config, launcher)  # type: ignore[arg-type]


@pytest.fixture
def make_sessions(config: PlaywrightConfig):
    """Factory for a SessionManager wired to a configurable FakeLauncher."""

    def _make(**launcher_kwargs: Any) -> tuple[SessionManager, FakeLauncher]:
        fake = FakeLauncher(**launcher_kwargs)
        return SessionManager(config, fake), fake  # type: ignore[arg-type]

    return _make


@pytest.fixture
def make_element():
    return FakeElement
