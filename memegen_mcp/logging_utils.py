"""
Logging utilities for the meme tool server.

Server logs go to stderr through the standard ``logging`` module (stdout is the
MCP stdio channel). Human-facing output from the CLI goes through a shared Rich
console.
"""

import logging
import sys

from rich.console import Console
from rich.panel import Panel

from .config import LOG_LEVEL

console = Console()

_NOISY_LOGGERS = ("httpx", "httpcore", "mcp", "urllib3", "uvicorn.access")

_configured = False


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once; later calls are no-ops."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='[%(levelname)s] memegen_mcp: %(message)s',
        stream=sys.stderr,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _configured = True


def print_error(title: str, message: str) -> None:
    """Show an error panel on the console."""
    console.print()
    console.print(Panel(
        f'[bold red]{message}[/bold red]',
        title=f'❌ {title}',
        border_style='red',
    ))
