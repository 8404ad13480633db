from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional, Tuple

from .config import ScoringConfig

_SEGMENT_DELIMITERS = re.compile(r"[/.]")


@dataclass(frozen=True)
class SearchQuery:
    """Search-string metadata derived once and shared by every score call."""

    lowercased: str
    parts: Tuple[str, ...]
    unique_chars: FrozenSet[str]

    @classmethod
    def from_string(cls, search_string: str) -> "SearchQuery":
        lowered = search_string.lower()
        return cls(
            lowercased=lowered,
            parts=tuple(lowered.split(" ")),
            unique_chars=frozenset(lowered),
        )

    @property
    def is_blank(self) -> bool:
        return not self.lowercased.strip()


@dataclass
class FuzzyScore:
    streak_score: int = 0
    filename_score: int = 0
    partial_path_score: int = 0
    multi_match_score: int = 0

    @property
    def total(self) -> int:
        return self.streak_score + self.filename_score + self.partial_path_score + self.multi_match_score

    def as_dict(self) -> dict:
        return {
            "streak": self.streak_score,
            "filename": self.filename_score,
            "partial_path": self.partial_path_score,
            "multi_match": self.multi_match_score,
        }


@dataclass
class _Streak:
    current: int = 0
    longest: int = 0

    def hit(self) -> None:
        self.current += 1
        if self.current > self.longest:
            self.longest = self.current

    def miss(self) -> None:
        self.current = 0


@dataclass
class ScoreCalculator:
    """
    Scores candidate paths against a single search string.

    Build one per search string and call `calculate_score` for every
    candidate. All scanning state lives inside the call, so an instance can
    be reused freely (but it is not meant to be shared between threads
    while its weights are being changed).
    """

    search_string: str
    config: ScoringConfig = field(default_factory=ScoringConfig)
    query: SearchQuery = field(init=False)

    def __post_init__(self) -> None:
        self.query = SearchQuery.from_string(self.search_string)

    def calculate_score(self, file_path: str) -> Optional[FuzzyScore]:
        """
        Returns None if no match can be found.
        """
        query = self.query
        if query.is_blank:
            return None

        path = file_path.lower()
        # Search string longer than the path can never match
        if len(query.lowercased) > len(path):
            return None

        config = self.config
        score = FuzzyScore()
        streak = _Streak()

        for part in query.parts:
            if not self._process_part(part, path, streak):
                return None
            score.partial_path_score += self._partial_path_score(part, path)

        if config.multi_match:
            matching = sum(1 for c in path if c in query.unique_chars)
            score.multi_match_score += (matching * config.match_weight_single_char) // 10

        filename_streak = self._filename_streak(path)

        score.streak_score = (streak.longest * config.match_weight_streak_modifier) // 10
        score.filename_score = (filename_streak * config.match_weight_filename) // 10
        return score

    @staticmethod
    def _process_part(part: str, path: str, streak: _Streak) -> bool:
        """
        Consume `part` in order from the start of `path`.
        Returns False as soon as the rest of the part can no longer fit.
        """
        part_index = 0
        path_index = 0
        part_length = len(part)
        path_length = len(path)

        while part_index < part_length:
            # TODO: allow a typo tolerance here once fuzzy insertions are supported
            if part_length - part_index > path_length - path_index:
                return False

            if part[part_index] == path[path_index]:
                part_index += 1
                streak.hit()
            else:
                streak.miss()
            path_index += 1

        return True

    def _partial_path_score(self, part: str, path: str) -> int:
        if not part:
            return 0
        hits = sum(1 for segment in _SEGMENT_DELIMITERS.split(path) if segment == part)
        return hits * self.config.match_weight_partial_path

    def _filename_streak(self, path: str) -> int:
        """Longest run of the full search string found in the filename segment."""
        search = self.query.lowercased
        search_index = 0
        path_index = path.rfind("/") + 1
        streak = _Streak()

        while search_index < len(search) and path_index < len(path):
            if search[search_index] == path[path_index]:
                search_index += 1
                streak.hit()
            else:
                streak.miss()
            path_index += 1

        return streak.longest

    def set_multi_match(self, value: bool) -> None:
        self.config = replace(self.config, multi_match=value)

    def set_match_weight_single_char(self, value: int) -> None:
        self.config = replace(self.config, match_weight_single_char=value)

    def set_match_weight_streak_modifier(self, value: int) -> None:
        self.config = replace(self.config, match_weight_streak_modifier=value)

    def set_match_weight_partial_path(self, value: int) -> None:
        self.config = replace(self.config, match_weight_partial_path=value)

    def set_filename_match_weight(self, value: int) -> None:
        self.config = replace(self.config, match_weight_filename=value)
