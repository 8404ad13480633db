from pathlib import Path

from fuzzier_mcp.core.fs import iter_candidate_paths, read_file_safe


def test_iter_candidate_paths_relative_and_ignored(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.py").write_text("")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "b.js").write_text("")
    (tmp_path / "c.bin").write_bytes(b"\x00")

    out = sorted(iter_candidate_paths(tmp_path))

    assert out == ["c.bin", "src/a.py"]


def test_iter_candidate_paths_globs(tmp_path):
    (tmp_path / "a.py").write_text("")
    (tmp_path / "b.md").write_text("")

    assert list(iter_candidate_paths(tmp_path, file_globs=["*.md"])) == ["b.md"]


def test_read_file_safe_missing(tmp_path):
    assert read_file_safe(tmp_path / "nope.txt") is None


def test_iter_candidate_paths_skips_unreadable_entries(tmp_path, monkeypatch):
    (tmp_path / "bad.txt").write_text("")
    (tmp_path / "good.txt").write_text("")
    real_is_file = Path.is_file

    def flaky_is_file(self):
        if self.name == "bad.txt":
            raise OSError("permission denied")
        return real_is_file(self)

    monkeypatch.setattr(Path, "is_file", flaky_is_file)

    assert list(iter_candidate_paths(tmp_path)) == ["good.txt"]
