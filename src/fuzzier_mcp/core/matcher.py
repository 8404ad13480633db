from __future__ import annotations

import itertools
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .config import ScoringConfig
from .logs import get_logger
from .scoring import FuzzyScore, ScoreCalculator

logger = get_logger("matcher")


@dataclass(frozen=True)
class FuzzyMatch:
    path: str
    score: FuzzyScore

    @property
    def total(self) -> int:
        return self.score.total


class SearchGeneration:
    """
    Hands out one token per search string; only the newest token is current.
    A ranking pass checks its token between candidates and gives up once a
    newer search has started.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._current = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._current = next(self._counter)
            return self._current

    def is_current(self, token: int) -> bool:
        return token == self._current


def rank_candidates(
    search_string: str,
    candidates: Iterable[str],
    config: Optional[ScoringConfig] = None,
    *,
    max_results: Optional[int] = None,
    is_current: Optional[Callable[[], bool]] = None,
) -> Optional[List[FuzzyMatch]]:
    """
    Score every candidate path and return the matches, best first.

    A blank search string matches nothing. Returns None when `is_current`
    reports that the pass was superseded.
    """
    if not search_string.strip():
        return []

    calculator = ScoreCalculator(search_string, config or ScoringConfig())
    start = time.perf_counter()
    matches: List[FuzzyMatch] = []
    scanned = 0

    for path in candidates:
        if is_current is not None and not is_current():
            logger.info("search %r superseded after %d candidate(s)", search_string, scanned)
            return None
        scanned += 1
        if not path or not path.strip():
            continue

        score = calculator.calculate_score(path)
        if score is not None:
            matches.append(FuzzyMatch(path, score))

    logger.debug(
        "search %r: %d/%d matched in %.1fms",
        search_string,
        len(matches),
        scanned,
        (time.perf_counter() - start) * 1000.0,
    )

    matches.sort(key=lambda m: (-m.total, m.path))
    if max_results is not None:
        matches = matches[:max(0, max_results)]
    return matches
