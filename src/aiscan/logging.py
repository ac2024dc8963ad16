"""
Logging setup for the aiscan CLI.

Engine modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves; the CLI calls ``setup_logging`` once.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL = os.getenv("AISCAN_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the aiscan logger to write to stderr through rich."""
    root = logging.getLogger("aiscan")
    root.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING))

    root.handlers.clear()
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("trafilatura").setLevel(logging.ERROR)

    return root
