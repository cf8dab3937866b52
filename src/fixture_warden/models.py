"""Core data models for Fixture Warden."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath


class Outcome(Enum):
    """Result of running one fixture or walking one subtree."""

    CONTINUE = "continue"
    ABORT = "abort"


class Resolution(Enum):
    """What the resolver decided for a failing fixture."""

    SKIP = "skip"
    RERUN = "rerun"
    QUIT = "quit"


@dataclass(frozen=True)
class Diagnostic:
    """A single message reported by an analysis engine."""

    kind: str  # SyntaxError, Warning, TypeError, ...
    message: str

    def __post_init__(self) -> None:
        # Messages are stored on one line in fixture files
        object.__setattr__(self, "message", " ".join(self.message.split()))

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}".rstrip()


@dataclass
class Fixture:
    """One test file: source text plus expected diagnostics."""

    name: str
    path: PurePath
    source: str
    expectations: list[Diagnostic] = field(default_factory=list)
    has_hard_failure: bool = False


@dataclass
class EngineResult:
    """Diagnostics produced by one engine invocation."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    hard_failure: bool = False
    # Unparsed engine output, shown as is on hard failure
    raw_output: list[str] = field(default_factory=list)

    def matches(self, fixture: Fixture) -> bool:
        """Check whether this result satisfies the fixture's expectations."""
        return not self.hard_failure and self.diagnostics == fixture.expectations


@dataclass
class Session:
    """Run and success counters for one invocation."""

    run_count: int = 0
    success_count: int = 0

    def record_run(self) -> None:
        self.run_count += 1

    def record_success(self) -> None:
        if self.success_count >= self.run_count:
            raise RuntimeError("success recorded for a fixture that was never run")
        self.success_count += 1

    @property
    def all_passed(self) -> bool:
        return self.success_count == self.run_count

    @property
    def exit_code(self) -> int:
        return 0 if self.all_passed else 1
