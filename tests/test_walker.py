"""Tests for fixture discovery and traversal order."""

from fixture_warden.config import DiscoveryConfig
from fixture_warden.models import Outcome

PASSING = "ok\n// ----\n"
FAILING = "error here\n// ----\n"


class TestTraversal:
    """Tests for walking a fixture tree."""

    def test_empty_directory(self, harness):
        h = harness({})

        assert h.walk() is Outcome.CONTINUE
        assert (h.session.run_count, h.session.success_count) == (0, 0)
        assert h.session.exit_code == 0

    def test_empty_subdirectories(self, harness):
        h = harness({}, dirs=("nested", "nested/deeper"))

        assert h.walk() is Outcome.CONTINUE
        assert h.session.run_count == 0

    def test_sorted_depth_first_order(self, harness):
        h = harness({
            "b.txt": PASSING,
            "a/z.txt": PASSING,
            "a/m/x.txt": PASSING,
            "c.txt": PASSING,
        })

        h.walk()

        assert h.engine.runs == ["a/m/x.txt", "a/z.txt", "b.txt", "c.txt"]
        assert (h.session.run_count, h.session.success_count) == (4, 4)

    def test_failures_counted_in_summary_ratio(self, harness):
        h = harness({"a.txt": PASSING, "b.txt": FAILING, "c.txt": PASSING}, keys="s")

        assert h.walk() is Outcome.CONTINUE
        assert (h.session.run_count, h.session.success_count) == (3, 2)
        assert h.session.exit_code == 1


class TestAbort:
    """Quitting stops the whole traversal."""

    def test_quit_in_nested_directory_stops_everything(self, harness):
        h = harness({
            "a/b/c/first.txt": PASSING,
            "a/b/c/second.txt": FAILING,
            "a/b/c/third.txt": PASSING,
            "a/later.txt": PASSING,
            "z.txt": PASSING,
        }, keys="q")

        assert h.walk() is Outcome.ABORT
        assert h.engine.runs == ["a/b/c/first.txt", "a/b/c/second.txt"]
        assert (h.session.run_count, h.session.success_count) == (2, 1)

    def test_quit_after_skip(self, harness):
        h = harness({"a.txt": FAILING, "b.txt": FAILING, "c.txt": FAILING}, keys="sq")

        assert h.walk() is Outcome.ABORT
        assert h.engine.runs == ["a.txt", "b.txt"]
        assert h.session.run_count == 2


class TestDiscoveryFilters:
    """Tests for pattern-based discovery."""

    def test_hidden_and_backup_files_excluded(self, harness):
        h = harness({"a.txt": PASSING, ".a.txt.swp": FAILING, "a.txt~": FAILING, ".hidden/b.txt": FAILING})

        h.walk()

        assert h.engine.runs == ["a.txt"]

    def test_patterns_select_files_in_any_directory(self, harness):
        discovery = DiscoveryConfig(patterns=("*.sol",))
        h = harness({"a.sol": PASSING, "notes.md": FAILING, "sub/b.sol": PASSING}, discovery=discovery)

        h.walk()

        assert h.engine.runs == ["a.sol", "sub/b.sol"]
