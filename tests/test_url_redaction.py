from __future__ import annotations

from mcp_servers.playwright_browser.server.redaction import (
    MAX_SCRIPT_CHARS,
    is_sensitive_key,
    redact_tool_arguments,
    redact_url,
)


def test_redact_url_strips_userinfo_and_secret_params() -> None:
    url = "https://user:pw@example.com/cb?code=1&access_token=abc&q=shoes"
    out = redact_url(url)
    assert "user:pw@" not in out
    assert "abc" not in out
    assert "q=shoes" in out
    assert "code=1" in out


def test_redact_url_keeps_plain_urls_unchanged() -> None:
    url = "https://example.com/search?q=a+b&page=2"
    assert redact_url(url) is url


def test_fill_into_password_field_is_redacted() -> None:
    out = redact_tool_arguments("playwright_fill", {"selector": "#password", "value": "hunter2"})
    assert out["selector"] == "#password"
    assert out["value"] == "<redacted str len=7>"


def test_fill_into_plain_field_is_kept() -> None:
    out = redact_tool_arguments("playwright_fill", {"selector": "#name", "value": "Ada"})
    assert out["value"] == "Ada"


def test_long_scripts_are_truncated() -> None:
    script = "x" * (MAX_SCRIPT_CHARS + 10)
    out = redact_tool_arguments("playwright_evaluate", {"script": script})
    assert out["script"].endswith(f"<truncated len={len(script)}>")


def test_sensitive_key_heuristic() -> None:
    assert is_sensitive_key("api_key")
    assert is_sensitive_key("auth")
    assert not is_sensitive_key("author")
    assert not is_sensitive_key("")
