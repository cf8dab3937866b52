"""Interactive resolution of failing fixtures."""

import shlex
import subprocess
from pathlib import PurePath
from typing import Callable

import click

from .config import FixtureFormatConfig
from .fixture import render_fixture
from .models import EngineResult, Fixture, Resolution
from .report import ConsoleReporter
from .store import FixtureStore

KeySource = Callable[[], str]
EditorRunner = Callable[[str, PurePath], int]

HARD_FAILURE_OPTIONS = "(e)dit/(s)kip/(q)uit"
MISMATCH_OPTIONS = "(e)dit/(u)pdate expectations/(s)kip/(q)uit"


def run_editor(editor: str, path: PurePath) -> int:
    """Open the file in the editor and wait for it to exit."""
    return subprocess.run(f"{editor} {shlex.quote(str(path))}", shell=True).returncode


class Resolver:
    """Ask the operator what to do with a failing fixture, then do it.

    Keys are read one at a time until a valid choice is made:

    - ``s`` leaves the fixture alone and moves on
    - ``u`` rewrites the expectations with the diagnostics just obtained
    - ``e`` opens the fixture in the editor
    - ``q`` stops the whole run, as does running out of input

    Update and edit both ask the runner to run the fixture again.
    """

    def __init__(
        self,
        store: FixtureStore,
        reporter: ConsoleReporter,
        fmt: FixtureFormatConfig,
        editor: str | None = None,
        keys: KeySource = click.getchar,
        editor_runner: EditorRunner = run_editor,
    ):
        self.store = store
        self.reporter = reporter
        self.fmt = fmt
        self.editor = editor
        self.keys = keys
        self.editor_runner = editor_runner

    def resolve(self, fixture: Fixture, result: EngineResult) -> Resolution:
        self.reporter.prompt(HARD_FAILURE_OPTIONS if fixture.has_hard_failure else MISMATCH_OPTIONS)

        while True:
            try:
                key = self.keys()
            except EOFError:
                key = ""
            if key == "s":
                self.reporter.choice_made()
                return Resolution.SKIP
            if key == "u" and not fixture.has_hard_failure:
                self.reporter.choice_made()
                self.update(fixture, result)
                return Resolution.RERUN
            if key == "e":
                self.reporter.choice_made()
                self.reporter.choice_made()
                self.edit(fixture)
                return Resolution.RERUN
            # End of input (Ctrl-D, closed stdin) counts as quit
            if key in ("q", ""):
                self.reporter.choice_made()
                return Resolution.QUIT

    def update(self, fixture: Fixture, result: EngineResult) -> None:
        """Persist the obtained diagnostics as the fixture's expectations."""
        content = render_fixture(fixture.source, result.diagnostics, self.fmt)
        self.store.write_text(fixture.path, content)

    def edit(self, fixture: Fixture) -> None:
        if not self.editor:
            self.reporter.warning("No editor configured, use --editor or set $EDITOR.")
            return
        if self.editor_runner(self.editor, fixture.path) != 0:
            self.reporter.warning("Error running editor command.")
