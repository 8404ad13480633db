from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, List

from .logs import get_logger

logger = get_logger("fs")

DEFAULT_IGNORES = {
    ".git", ".venv", "venv", "__pycache__", ".pytest_cache", ".mypy_cache",
    "node_modules", "dist", "build", ".idea", ".gradle"
}


def iter_candidate_paths(root: Path, file_globs: Optional[List[str]] = None) -> Iterator[str]:
    """
    Yield every file under root as a forward-slash path relative to root.
    """
    root = root.resolve()
    for p in root.rglob("*"):
        rel = p.relative_to(root)
        if any(part in DEFAULT_IGNORES for part in rel.parts):
            continue
        try:
            if not p.is_file():
                continue
        except OSError as e:
            logger.debug("skipping %s: %s", p, e)
            continue

        if file_globs and not any(p.match(g) for g in file_globs):
            continue

        yield rel.as_posix()


def read_file_safe(path: Path) -> Optional[str]:
    try:
        if not path.exists() or not path.is_file():
            return None
        return path.read_text(encoding="utf-8", errors="ignore")
    except Exception as e:
        logger.warning("could not read %s: %s", path, e)
        return None
