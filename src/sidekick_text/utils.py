from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging
import sys
from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"

def setup_logging(level: int = logging.INFO) -> None:
    """Route log records through rich on stderr. Safe to call more than once."""
    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers:
        if isinstance(h, RichHandler):
            h.setLevel(level)
            return
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    root.addHandler(handler)

def read_source(source: Optional[Path]) -> str:
    if source is None or str(source) == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")
