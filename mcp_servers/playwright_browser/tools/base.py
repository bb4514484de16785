"""
Base utilities for browser automation tools.

Provides:
- SmartToolError: Structured errors for AI agents
- require_text: Input validation for required string arguments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# Error Handling
@dataclass
class SmartToolError(Exception):
    """Structured error with context for AI agents."""

    tool: str
    action: str
    reason: str
    suggestion: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.tool}] {self.action} failed: {self.reason}. Suggestion: {self.suggestion}"


def require_text(tool: str, name: str, value: Any) -> str:
    """Return value if it is a non-empty string, else raise a validation error."""
    if not isinstance(value, str) or not value.strip():
        raise SmartToolError(
            tool=tool,
            action="validate",
            reason=f"'{name}' must be a non-empty string",
            suggestion=f"Provide a value for '{name}'",
        )
    return value
