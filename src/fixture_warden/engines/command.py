"""Engine that runs an external analysis command."""

import os
import shlex
import subprocess
import tempfile
from pathlib import Path

from ..errors import EngineError
from ..fixture import parse_diagnostic
from ..models import EngineResult, Fixture
from .base import AnalysisEngine


class CommandEngine(AnalysisEngine):
    """Run a shell command and read ``Kind: message`` lines from its stdout.

    ``{path}`` in the command is replaced by the quoted path of a temporary
    file holding the fixture source (same suffix as the fixture); without it
    the fixture source is written to the command's stdin.
    """

    def __init__(self, command: str, completed_codes: tuple[int, ...] = (0, 1)):
        self.command = command
        self.completed_codes = completed_codes

    def run(self, fixture: Fixture) -> EngineResult:
        if "{path}" not in self.command:
            return self._execute(self.command, fixture.source)

        fd, source_path = tempfile.mkstemp(suffix=Path(fixture.path).suffix, prefix="fixture-warden-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(fixture.source)
            return self._execute(self.command.replace("{path}", shlex.quote(source_path)), None)
        finally:
            Path(source_path).unlink(missing_ok=True)

    def _execute(self, cmd: str, stdin: str | None) -> EngineResult:
        try:
            result = subprocess.run(
                cmd,
                shell=True,
                input=stdin,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise EngineError(f"cannot run engine command {cmd!r}: {e}") from e

        # 127 is the shell's "command not found"
        if result.returncode == 127:
            raise EngineError(f"engine command not found: {result.stderr.strip()}")

        raw_output = (result.stdout + result.stderr).splitlines()
        if result.returncode not in self.completed_codes:
            return EngineResult(hard_failure=True, raw_output=raw_output)

        diagnostics = []
        for line in result.stdout.splitlines():
            if not line.strip():
                continue
            diagnostic = parse_diagnostic(line)
            if diagnostic is None:
                return EngineResult(hard_failure=True, raw_output=raw_output)
            diagnostics.append(diagnostic)

        return EngineResult(diagnostics=diagnostics)
