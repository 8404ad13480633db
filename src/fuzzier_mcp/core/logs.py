from __future__ import annotations

import logging
import os
import sys

_ROOT = "fuzzier_mcp"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _ensure_logging_configured() -> None:
    root = logging.getLogger(_ROOT)
    if root.handlers:
        return
    # stdout is the MCP stdio transport
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(h)
    root.setLevel(_resolve_level(os.environ.get("FUZZIER_LOG_LEVEL", "INFO")))


def get_logger(name: str) -> logging.Logger:
    _ensure_logging_configured()
    return logging.getLogger(f"{_ROOT}.{name}")
