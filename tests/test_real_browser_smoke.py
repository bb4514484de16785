from __future__ import annotations

import asyncio
import os
from pathlib import Path

import pytest

from mcp_servers.playwright_browser import tools
from mcp_servers.playwright_browser.config import PlaywrightConfig
from mcp_servers.playwright_browser.session import SessionManager

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_BROWSER_INTEGRATION") != "1",
    reason="Requires Playwright browsers (playwright install chromium). Set RUN_BROWSER_INTEGRATION=1 to enable.",
)

PAGE_HTML = """
<html><body>
  <input id="name">
  <select id="color"><option value="red">Red</option><option value="blue">Blue</option></select>
  <button id="go" onclick="document.title='clicked'">Go</button>
</body></html>
"""


def test_real_browser_round_trip(tmp_path: Path) -> None:
    page_file = tmp_path / "form.html"
    page_file.write_text(PAGE_HTML, encoding="utf-8")
    url = page_file.as_uri()

    config = PlaywrightConfig(screenshot_dir=str(tmp_path / "shots"), log_dir=str(tmp_path / "logs"))
    sessions = SessionManager(config)

    async def _main() -> None:
        try:
            assert await tools.navigate(sessions, url, timeout=5000) == "Navigated to " + url
            assert "Ada" in await tools.fill(sessions, "#name", "Ada")
            assert await tools.select(sessions, "#color", "blue") == "Selected #color with: blue"
            assert await tools.click(sessions, "#go") == "Clicked element: #go"
            assert (await tools.evaluate(sessions, "document.title"))[-1] == '"clicked"'
            assert (await tools.evaluate(sessions, "1+1"))[-1] == "2"

            saved = await tools.screenshot(sessions, "form", selector="#go", save_png=True)
            assert Path(saved.removeprefix("Screenshot saved to ")).exists()
            assert await tools.screenshot(sessions, "form", selector="#nope") == "Element not found: #nope"
        finally:
            await tools.close(sessions)

    asyncio.run(_main())
    assert not sessions.has_session
