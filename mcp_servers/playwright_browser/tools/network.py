"""
Script evaluation tool.

Provides:
- evaluate: Run JavaScript in the page and return the JSON-encoded result
"""

from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING, Any

from .types import EvaluateOptions

if TYPE_CHECKING:
    from ..session import SessionManager


def _json_safe(value: Any) -> Any:
    # NaN and +/-Infinity become null, as JSON.stringify does.
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


def encode_result(result: Any) -> str:
    """JSON text for an evaluation result (`undefined` comes back as None -> `null`)."""
    return json.dumps(_json_safe(result), ensure_ascii=False, allow_nan=False, default=str)


async def evaluate(sessions: SessionManager, script: str) -> list[str]:
    """
    Evaluate JavaScript in the active page context.

    Returns:
        ["Evaluated script:", script, "with result:", <json result>]
    """
    opts = EvaluateOptions(script=script)
    page = await sessions.acquire_page()
    result = await page.evaluate(opts.script)
    return ["Evaluated script:", opts.script, "with result:", encode_result(result)]
