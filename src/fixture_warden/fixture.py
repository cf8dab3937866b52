"""Fixture file format: program source followed by an expectations block.

A fixture looks like::

    x = (
    // ----
    // SyntaxError: line 1: '(' was never closed

Everything before the delimiter line is source text handed to the engine.
Every non-blank line after it is one expected diagnostic. The comment prefix
is configurable; the delimiter is always the prefix followed by ``----``.
"""

import re
from pathlib import PurePath

from .config import FixtureFormatConfig
from .errors import FixtureError
from .models import Diagnostic, Fixture
from .store import FixtureStore

DIAGNOSTIC_PATTERN = re.compile(r"^(?P<kind>[A-Za-z_][\w.]*):(?: (?P<message>.*))?$")


def parse_diagnostic(text: str) -> Diagnostic | None:
    """Parse a ``Kind: message`` line, or return None if it has another shape."""
    match = DIAGNOSTIC_PATTERN.match(text.strip())
    if not match:
        return None
    return Diagnostic(kind=match.group("kind"), message=match.group("message") or "")


def split_fixture(content: str, fmt: FixtureFormatConfig) -> tuple[str, list[Diagnostic]]:
    """Split file content into source text and expected diagnostics."""
    lines = content.splitlines(keepends=True)
    source_lines: list[str] = []
    expectations: list[Diagnostic] = []

    index = 0
    while index < len(lines) and lines[index].rstrip() != fmt.delimiter:
        source_lines.append(lines[index])
        index += 1

    for number, line in enumerate(lines[index + 1:], start=index + 2):
        text = line.strip()
        if not text:
            continue
        if not text.startswith(fmt.comment_prefix):
            raise FixtureError(f"expectation must start with '{fmt.comment_prefix}'", line=number)
        diagnostic = parse_diagnostic(text[len(fmt.comment_prefix):])
        if diagnostic is None:
            raise FixtureError(f"invalid expectation, expected 'Kind: message': {text!r}", line=number)
        expectations.append(diagnostic)

    source = "".join(source_lines)
    if source and not source.endswith("\n"):
        source += "\n"
    return source, expectations


def render_fixture(source: str, diagnostics: list[Diagnostic], fmt: FixtureFormatConfig) -> str:
    """Render source and diagnostics as plain fixture file content."""
    if source and not source.endswith("\n"):
        source += "\n"
    block = [fmt.delimiter] + [f"{fmt.comment_prefix} {diagnostic}" for diagnostic in diagnostics]
    return source + "\n".join(block) + "\n"


def load_fixture(store: FixtureStore, name: str, path: PurePath, fmt: FixtureFormatConfig) -> Fixture:
    """Read and parse a fixture, raising FixtureError when it is unusable."""
    try:
        content = store.read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureError(str(e)) from e

    source, expectations = split_fixture(content, fmt)
    return Fixture(name=name, path=path, source=source, expectations=expectations)
