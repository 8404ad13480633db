from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..core.config import load_scoring_config
from ..core.fs import iter_candidate_paths, read_file_safe
from ..core.matcher import rank_candidates
from ..server import mcp

CANNOT_READ = "Cannot read file"


def _top_match(search: str, root: Path) -> Optional[str]:
    matches = rank_candidates(search, iter_candidate_paths(root), load_scoring_config(), max_results=1)
    if not matches:
        return None
    return matches[0].path


@mcp.tool()
def preview_file(
    path: Optional[str] = None,
    search: Optional[str] = None,
    root: str = ".",
    max_chars: int = 6000,
) -> dict:
    """
    Preview the selected search result.

    Pass the result `path` as returned by fuzzy_search. Without a path,
    the best match for `search` is selected, as the result list does when
    it is first shown.
    """
    root_path = Path(root).resolve()
    if path is None:
        path = _top_match(search or "", root_path)
        if path is None:
            return {"root": str(root_path), "path": None, "ok": False, "error": "No matching file"}

    selected = (root_path / path).resolve()
    if not selected.is_relative_to(root_path):
        return {"root": str(root_path), "path": path, "ok": False, "error": "Path outside root"}

    text = read_file_safe(selected)
    if text is None:
        return {"root": str(root_path), "path": path, "ok": False, "error": CANNOT_READ}

    return {
        "root": str(root_path),
        "path": path,
        "ok": True,
        "content": text[:max_chars],
        "truncated": len(text) > max_chars,
    }
