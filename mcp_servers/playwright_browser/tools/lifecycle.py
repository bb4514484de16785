"""Browser lifecycle tool."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..session import SessionManager


async def close(sessions: SessionManager) -> str:
    """Close page, browser and engine. The next tool call starts a fresh session."""
    return await sessions.release_all()
