"""
Browser automation tools organized by domain.

Each handler takes the shared SessionManager as its first argument:
- base: Errors and input validation
- types: Engine capability protocol and per-call options
- navigation: navigate
- dom: screenshot
- input: click, iframe_click, hover
- forms: fill, select
- network: evaluate
- lifecycle: close
"""

from .base import SmartToolError, require_text
from .dom import screenshot
from .forms import fill, select
from .input import click, hover, iframe_click
from .lifecycle import close
from .navigation import navigate
from .network import encode_result, evaluate

__all__ = [
    "SmartToolError",
    "require_text",
    "navigate",
    "screenshot",
    "click",
    "iframe_click",
    "fill",
    "select",
    "hover",
    "evaluate",
    "encode_result",
    "close",
]
