"""
Type definitions shared by the tool handlers.

- PageLike / ElementLike / FrameLocatorLike: the narrow slice of the engine's
  page API that handlers depend on. Playwright's async Page satisfies it; the
  test suite provides fakes.
- *Options: one validated value per tool call, listing every recognized
  argument and its default.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from ..config import DEFAULT_NAV_TIMEOUT_MS, default_downloads_dir
from .base import SmartToolError, require_text

# ═══════════════════════════════════════════════════════════════════════════════
# Engine capability protocol
# ═══════════════════════════════════════════════════════════════════════════════


class ElementLike(Protocol):
    async def scroll_into_view_if_needed(self) -> None: ...

    async def screenshot(self, *, path: str, type: str) -> bytes: ...

    async def content_frame(self) -> Any: ...


class LocatorLike(Protocol):
    async def click(self) -> None: ...


class FrameLocatorLike(Protocol):
    def locator(self, selector: str) -> LocatorLike: ...


class PageLike(Protocol):
    async def goto(self, url: str, *, timeout: float, wait_until: str) -> Any: ...

    async def click(self, selector: str) -> None: ...

    async def fill(self, selector: str, value: str) -> None: ...

    async def hover(self, selector: str) -> None: ...

    async def select_option(self, selector: str, value: str) -> list[str]: ...

    async def wait_for_selector(self, selector: str) -> ElementLike | None: ...

    async def query_selector(self, selector: str) -> ElementLike | None: ...

    async def screenshot(self, *, path: str, full_page: bool, type: str) -> bytes: ...

    async def evaluate(self, expression: str) -> Any: ...

    def frame_locator(self, selector: str) -> FrameLocatorLike: ...

    async def close(self) -> None: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Per-call options
# ═══════════════════════════════════════════════════════════════════════════════

_last_timestamp = 0
_timestamp_lock = threading.Lock()


def unique_timestamp() -> int:
    """Nanosecond wall-clock stamp, strictly increasing within the process."""
    global _last_timestamp
    with _timestamp_lock:
        _last_timestamp = max(time.time_ns(), _last_timestamp + 1)
        return _last_timestamp


@dataclass(frozen=True, slots=True)
class NavigateOptions:
    url: str
    timeout: int = DEFAULT_NAV_TIMEOUT_MS

    def __post_init__(self) -> None:
        require_text("navigate", "url", self.url)
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, int) or self.timeout < 0:
            raise SmartToolError(
                tool="navigate",
                action="validate",
                reason=f"timeout must be a non-negative integer (got {self.timeout!r})",
                suggestion="Pass the navigation timeout in milliseconds, 0 disables it",
            )


@dataclass(frozen=True, slots=True)
class ScreenshotOptions:
    name: str
    selector: str | None = None
    full_page: bool = False
    save_png: bool = False
    downloads_dir: str | None = None

    def __post_init__(self) -> None:
        require_text("screenshot", "name", self.name)
        if any(sep in self.name for sep in ("/", "\\")):
            raise SmartToolError(
                tool="screenshot",
                action="validate",
                reason=f"name must not contain path separators: {self.name}",
                suggestion="Use downloads_dir to choose the directory",
            )

    @property
    def image_type(self) -> str:
        return "png" if self.save_png else "jpeg"

    @property
    def extension(self) -> str:
        return "png" if self.save_png else "jpg"

    def directory(self, fallback: str | None = None) -> Path:
        raw = self.downloads_dir or fallback or default_downloads_dir()
        return Path(raw).expanduser()

    def target_path(self, fallback: str | None = None) -> Path:
        """`<dir>/<name>-<ns timestamp>.<ext>`, unique per call."""
        return self.directory(fallback) / f"{self.name}-{unique_timestamp()}.{self.extension}"


@dataclass(frozen=True, slots=True)
class SelectorOptions:
    selector: str
    tool: str = "click"

    def __post_init__(self) -> None:
        require_text(self.tool, "selector", self.selector)


@dataclass(frozen=True, slots=True)
class IframeClickOptions:
    selector: str
    iframe_selector: str

    def __post_init__(self) -> None:
        require_text("iframe_click", "selector", self.selector)
        require_text("iframe_click", "iframe_selector", self.iframe_selector)


@dataclass(frozen=True, slots=True)
class FillOptions:
    selector: str
    value: str
    tool: str = "fill"

    def __post_init__(self) -> None:
        require_text(self.tool, "selector", self.selector)
        if not isinstance(self.value, str):
            raise SmartToolError(
                tool=self.tool,
                action="validate",
                reason="'value' must be a string",
                suggestion="Pass the value as text",
            )


@dataclass(frozen=True, slots=True)
class EvaluateOptions:
    script: str

    def __post_init__(self) -> None:
        require_text("evaluate", "script", self.script)
