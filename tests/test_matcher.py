from fuzzier_mcp.core.config import ScoringConfig
from fuzzier_mcp.core.matcher import SearchGeneration, rank_candidates

PATHS = [
    "src/main/MyFile.kt",
    "src/test/MyFileTest.kt",
    "README.md",
    "build.gradle.kts",
]


def test_blank_search_returns_no_matches():
    assert rank_candidates("", PATHS) == []
    assert rank_candidates("   ", PATHS) == []


def test_ranks_best_match_first():
    out = rank_candidates("myfile kt", PATHS)

    paths = [m.path for m in out]
    assert paths == ["src/main/MyFile.kt", "src/test/MyFileTest.kt"]
    assert out[0].total >= out[1].total


def test_ties_are_ordered_by_path():
    out = rank_candidates("abc", ["x/abc.txt", "w/abc.txt"])

    assert out[0].total == out[1].total
    assert [m.path for m in out] == ["w/abc.txt", "x/abc.txt"]


def test_max_results_and_blank_candidates():
    out = rank_candidates("kt", ["", "  ", *PATHS], ScoringConfig(multi_match=True), max_results=1)

    assert len(out) == 1
    assert out[0].path.endswith(".kt")


def test_superseded_pass_returns_none():
    gen = SearchGeneration()
    token = gen.next()
    seen = []

    def candidates():
        for p in PATHS:
            seen.append(p)
            if len(seen) == 2:
                gen.next()
            yield p

    out = rank_candidates("kt", candidates(), is_current=lambda: gen.is_current(token))

    assert out is None
    assert len(seen) == 2


def test_generation_tokens():
    gen = SearchGeneration()
    first = gen.next()
    second = gen.next()

    assert second > first
    assert gen.is_current(second)
    assert not gen.is_current(first)


def test_negative_max_results_returns_nothing():
    assert rank_candidates("kt", PATHS, max_results=-1) == []
