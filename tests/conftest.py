"""Shared fixtures for Fixture Warden tests."""

import io
from pathlib import PurePosixPath

import pytest
from rich.console import Console

from fixture_warden.config import DiscoveryConfig, FixtureFormatConfig
from fixture_warden.engines import AnalysisEngine
from fixture_warden.fixture import split_fixture
from fixture_warden.models import Diagnostic, EngineResult, Fixture, Session
from fixture_warden.report import ConsoleReporter
from fixture_warden.resolver import Resolver
from fixture_warden.runner import FixtureRunner
from fixture_warden.store import FixtureStore
from fixture_warden.walker import FixtureWalker

ROOT = PurePosixPath("/suite")


class MemoryStore(FixtureStore):
    """In-memory fixture tree keyed by path; parents of files are directories."""

    def __init__(self, files: dict[str, str] | None = None, dirs: tuple[str, ...] = ()):
        self.files = {ROOT / name: content for name, content in (files or {}).items()}
        self.dirs = {ROOT} | {ROOT / name for name in dirs}
        self.writes: list[PurePosixPath] = []
        self.reads: list[PurePosixPath] = []

    def is_dir(self, path):
        return path in self.dirs or any(path in f.parents for f in self.files)

    def exists(self, path):
        return path in self.files or self.is_dir(path)

    def list_dir(self, path):
        entries = [*self.files, *self.dirs]
        return list({e.relative_to(path).parts[0] for e in entries if path in e.parents})

    def read_text(self, path):
        self.reads.append(path)
        if path not in self.files:
            raise FileNotFoundError(f"No such file: '{path}'")
        return self.files[path]

    def write_text(self, path, content):
        self.writes.append(path)
        self.files[path] = content

    def content(self, name: str) -> str:
        return self.files[ROOT / name]


class FakeEngine(AnalysisEngine):
    """Engine that reports one diagnostic per source line starting with 'error'.

    A line reading 'crash' makes the run a hard failure.
    """

    def __init__(self):
        self.runs: list[str] = []

    def run(self, fixture: Fixture) -> EngineResult:
        self.runs.append(fixture.name)
        diagnostics = []
        for number, line in enumerate(fixture.source.splitlines(), start=1):
            if line == "crash":
                return EngineResult(diagnostics=[Diagnostic("InternalError", "engine crashed")], hard_failure=True)
            if line.startswith("error"):
                diagnostics.append(Diagnostic("Error", f"line {number}: {line}"))
        return EngineResult(diagnostics=diagnostics)


class ScriptedKeys:
    """Key source that replays a fixed sequence of keystrokes."""

    def __init__(self, keys: str = ""):
        self.keys = list(keys)
        self.read = 0

    def __call__(self) -> str:
        self.read += 1
        return self.keys.pop(0) if self.keys else ""


class Harness:
    """Everything needed to drive a walk against an in-memory tree."""

    def __init__(self, files, keys="", editor=None, editor_runner=None, discovery=None, dirs=()):
        self.fmt = FixtureFormatConfig()
        self.store = MemoryStore(files, dirs)
        self.engine = FakeEngine()
        self.session = Session()
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.reporter = ConsoleReporter(
            Console(file=self.out, color_system=None, soft_wrap=True),
            Console(file=self.err, color_system=None, soft_wrap=True),
        )
        self.keys = ScriptedKeys(keys)
        self.editor_calls = []

        def record_editor(editor, path):
            self.editor_calls.append((editor, path))
            return editor_runner(editor, path) if editor_runner else 0

        self.resolver = Resolver(
            self.store, self.reporter, self.fmt,
            editor=editor, keys=self.keys, editor_runner=record_editor,
        )
        self.runner = FixtureRunner(self.engine, self.store, self.reporter, self.resolver, self.session, self.fmt)
        self.walker = FixtureWalker(ROOT, self.store, self.runner, self.session, discovery or DiscoveryConfig())

    def walk(self):
        return self.walker.walk()

    @property
    def output(self) -> str:
        return self.out.getvalue()

    def expectations(self, name: str) -> list[Diagnostic]:
        return split_fixture(self.store.content(name), self.fmt)[1]


@pytest.fixture
def harness():
    """Factory for walk harnesses."""
    return Harness


@pytest.fixture(autouse=True)
def no_editor_env(monkeypatch):
    """Keep the developer's $EDITOR out of configuration tests."""
    monkeypatch.delenv("EDITOR", raising=False)
