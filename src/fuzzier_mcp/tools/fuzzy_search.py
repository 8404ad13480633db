from __future__ import annotations

import threading
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional

from anyio import to_thread

from ..core.config import load_scoring_config
from ..core.fs import iter_candidate_paths
from ..core.logs import get_logger
from ..core.matcher import SearchGeneration, rank_candidates
from ..server import mcp

logger = get_logger("tools.fuzzy_search")

_generations: Dict[Path, SearchGeneration] = {}
_generations_lock = threading.Lock()


def _generation_for(root: Path) -> SearchGeneration:
    """One generation per project root: a new search only supersedes searches of the same root."""
    with _generations_lock:
        gen = _generations.get(root)
        if gen is None:
            gen = _generations[root] = SearchGeneration()
        return gen


@mcp.tool()
async def fuzzy_search(
    search: str,
    root: str = ".",
    max_results: int = 20,
    multi_match: Optional[bool] = None,
    file_globs: Optional[List[str]] = None,
) -> dict:
    """
    Fuzzy-find files in the project by path.

    Space-separated parts must each appear in order somewhere in the path.
    Results are ranked by the sum of their streak, filename, partial-path
    and multi-match scores. A search that is overtaken by a newer search
    on the same root returns no results and "superseded": true.
    """
    root_path = Path(root).resolve()
    config = load_scoring_config()
    if multi_match is not None:
        config = replace(config, multi_match=multi_match)

    generation = _generation_for(root_path)
    token = generation.next()
    matches = await to_thread.run_sync(
        lambda: rank_candidates(
            search,
            iter_candidate_paths(root_path, file_globs=file_globs),
            config,
            max_results=max_results,
            is_current=lambda: generation.is_current(token),
        )
    )

    out = {
        "search": search,
        "root": str(root_path),
        "config": config.as_dict(),
        "superseded": matches is None,
        "results": [],
    }
    if matches is None:
        return out

    out["results"] = [
        {
            "path": m.path,
            "score": m.total,
            "components": m.score.as_dict(),
        }
        for m in matches
    ]
    logger.info("fuzzy_search %r: %d result(s) under %s", search, len(out["results"]), root_path)
    return out
