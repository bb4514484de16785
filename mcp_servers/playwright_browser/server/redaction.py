"""Redaction utilities for the tool-call log.

Prefers safety over fidelity: secrets typed into password-like fields and
credentials embedded in URLs never reach the log file.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SENSITIVE_SUBSTRINGS = (
    "token",
    "secret",
    "password",
    "passwd",
    "pwd",
    "authorization",
    "cookie",
    "session",
    "jwt",
    "bearer",
    "api-key",
    "api_key",
    "apikey",
    "otp",
    "cvv",
)

_SENSITIVE_EXACT = {
    # Avoid false-positives like "author"/"authorship" while still protecting obvious keys.
    "auth",
    "pass",
}

MAX_SCRIPT_CHARS = 500


def is_sensitive_key(key: str) -> bool:
    k = (key or "").strip().lower()
    if not k:
        return False
    if k in _SENSITIVE_EXACT:
        return True
    return any(s in k for s in _SENSITIVE_SUBSTRINGS)


def redact_url(url: str) -> str:
    """Drop userinfo and redact sensitive query values; other URLs come back unchanged."""
    if not isinstance(url, str) or not url:
        return url
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    changed = False
    netloc = parts.netloc
    query = parts.query

    if "@" in netloc:
        netloc = netloc.split("@", 1)[1]
        changed = True

    if query:
        pairs = parse_qsl(query, keep_blank_values=True)
        out_pairs = [(k, "<redacted>" if v and is_sensitive_key(k) else v) for k, v in pairs]
        if out_pairs != pairs:
            query = urlencode(out_pairs)
            changed = True

    if not changed:
        return url
    return urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment))


def _redacted_summary(value: Any) -> str:
    if isinstance(value, str):
        return f"<redacted str len={len(value)}>"
    return "<redacted>"


def redact_tool_arguments(tool: str, args: dict[str, Any]) -> dict[str, Any]:
    """Redact tool arguments for safe logging."""
    out: dict[str, Any] = {}
    selector = str(args.get("selector") or "")
    for key, value in (args or {}).items():
        if key == "url" and isinstance(value, str):
            out[key] = redact_url(value)
        elif key == "value" and tool.endswith("fill") and is_sensitive_key(selector):
            out[key] = _redacted_summary(value)
        elif key == "script" and isinstance(value, str) and len(value) > MAX_SCRIPT_CHARS:
            out[key] = value[:MAX_SCRIPT_CHARS] + f"... <truncated len={len(value)}>"
        elif is_sensitive_key(key):
            out[key] = _redacted_summary(value)
        else:
            out[key] = value
    return out
