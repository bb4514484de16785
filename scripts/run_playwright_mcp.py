#!/usr/bin/env python3
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

print(
    f"[mcp] browser={os.environ.get('MCP_BROWSER_TYPE', 'chromium')} | "
    f"headless={os.environ.get('MCP_BROWSER_HEADLESS', '1')} | "
    f"screenshots={os.environ.get('MCP_SCREENSHOT_DIR', '~/Downloads')} | "
    f"logs={os.environ.get('MCP_LOG_DIR', str(ROOT / 'logs'))}",
    file=sys.stderr,
)

from mcp_servers.playwright_browser.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
