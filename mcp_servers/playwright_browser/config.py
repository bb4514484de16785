from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

BROWSER_TYPES = ("chromium", "firefox", "webkit")
DEFAULT_NAV_TIMEOUT_MS = 20000


def expand_path(raw: str) -> str:
    return str(Path(raw).expanduser())


def default_log_dir() -> str:
    # Relative to the running process, not the installed package.
    return str(Path.cwd() / "logs")


def default_downloads_dir() -> str:
    return str(Path.home() / "Downloads")


def _env_flag(name: str, default: bool) -> bool:
    raw = (os.environ.get(name) or "").strip().lower()
    if not raw:
        return default
    return raw not in {"0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name) or default)
    except ValueError:
        return default


def parse_viewport(raw: str | None) -> dict[str, int] | None:
    """Parse `1280x720` into a Playwright viewport dict."""
    if not raw:
        return None
    width, sep, height = raw.strip().lower().partition("x")
    if not sep:
        return None
    try:
        w, h = int(width), int(height)
    except ValueError:
        return None
    if w <= 0 or h <= 0:
        return None
    return {"width": w, "height": h}


@dataclass
class PlaywrightConfig:
    browser_type: str = "chromium"
    headless: bool = True
    extra_flags: list[str] = field(default_factory=list)
    slow_mo: int = 0
    viewport: dict[str, int] | None = None
    screenshot_dir: str = field(default_factory=default_downloads_dir)
    nav_timeout_ms: int = DEFAULT_NAV_TIMEOUT_MS
    log_dir: str = field(default_factory=default_log_dir)
    log_level: str = "DEBUG"
    trace_calls: bool = False

    @staticmethod
    def normalize_browser_type(raw: str | None) -> str:
        name = (raw or "").strip().lower()
        if name in {"chrome", "chromium", ""}:
            return "chromium"
        if name in {"firefox", "ff"}:
            return "firefox"
        if name in {"webkit", "safari"}:
            return "webkit"
        return "chromium"

    @classmethod
    def from_env(cls) -> PlaywrightConfig:
        flags_raw = os.environ.get("MCP_BROWSER_FLAGS", "")
        screenshot_dir = os.environ.get("MCP_SCREENSHOT_DIR")
        log_dir = os.environ.get("MCP_LOG_DIR")
        nav_timeout = _env_int("MCP_NAV_TIMEOUT", DEFAULT_NAV_TIMEOUT_MS)
        return cls(
            browser_type=cls.normalize_browser_type(os.environ.get("MCP_BROWSER_TYPE")),
            headless=_env_flag("MCP_BROWSER_HEADLESS", True),
            extra_flags=[flag.strip() for flag in flags_raw.split(",") if flag.strip()],
            slow_mo=max(0, _env_int("MCP_BROWSER_SLOW_MO", 0)),
            viewport=parse_viewport(os.environ.get("MCP_VIEWPORT")),
            screenshot_dir=expand_path(screenshot_dir) if screenshot_dir else default_downloads_dir(),
            nav_timeout_ms=nav_timeout if nav_timeout > 0 else DEFAULT_NAV_TIMEOUT_MS,
            log_dir=expand_path(log_dir) if log_dir else default_log_dir(),
            log_level=(os.environ.get("MCP_LOG_LEVEL") or "DEBUG").strip().upper(),
            trace_calls=_env_flag("MCP_TRACE", False),
        )
