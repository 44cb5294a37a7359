"""Tests for the life-lessons journal."""

from psymaze.services.journal import append_reflection, format_journal, log_life_lesson, read_journal


class TestWrite:
    def test_append_lines(self, tmp_path):
        path = str(tmp_path / "journal.txt")
        assert log_life_lesson(path, "first")
        assert log_life_lesson(path, "second")
        assert read_journal(path) == ["first", "second"]

    def test_reflection_prefix(self, tmp_path):
        path = str(tmp_path / "journal.txt")
        append_reflection(path, "  calmer now \n")
        assert read_journal(path) == ["[End-of-session reflection] calmer now"]

    def test_write_failure_returns_false(self, tmp_path):
        assert log_life_lesson(str(tmp_path / "no" / "journal.txt"), "x") is False


class TestRead:
    def test_missing_file(self, tmp_path):
        assert read_journal(str(tmp_path / "journal.txt")) is None

    def test_format_missing(self):
        assert "No journal entries yet" in format_journal(None)

    def test_format_entries(self):
        out = format_journal(["a", "b"])
        assert "===== Life Lessons Journal =====" in out
        assert "- a\n- b" in out
