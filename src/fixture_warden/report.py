"""Console output for fixture runs."""

from rich.console import Console
from rich.text import Text

from .models import Diagnostic, EngineResult, Fixture, Session


def make_console(color: bool, stderr: bool = False) -> Console:
    """Create a console; without color no escape sequences are ever written."""
    return Console(
        stderr=stderr,
        color_system="auto" if color else None,
        highlight=False,
        soft_wrap=True,
    )


class ConsoleReporter:
    """Everything the operator sees goes through here."""

    def __init__(self, console: Console, err_console: Console | None = None):
        self.console = console
        self.err_console = err_console or console

    def announce(self, name: str) -> None:
        self.console.print(Text(f"{name}: ", style="bold"), end="")

    def cannot_read(self, error: Exception) -> None:
        self.console.print(Text(f"cannot read test: {error}", style="red"))

    def ok(self) -> None:
        self.console.print("[green]OK[/]")

    def fail(self) -> None:
        self.console.print("[red]FAIL[/]")

    def source(self, fixture: Fixture) -> None:
        self.console.print("  Source:")
        for line in fixture.source.splitlines():
            self.console.print(Text(f"    {line}", style="cyan"))
        self.console.print()

    def hard_failure(self, result: EngineResult) -> None:
        self.console.print(Text("  "), Text("Parsing failed:", style="reverse red"), sep="")
        if result.diagnostics:
            self.diagnostics(result.diagnostics, "    ")
        for line in result.raw_output:
            self.console.print(Text(f"    {line}"))
        self.console.print()

    def mismatch(self, expected: list[Diagnostic], obtained: list[Diagnostic]) -> None:
        self.console.print("  [bold cyan]Expected result:[/]")
        self.diagnostics(expected, "    ")
        self.console.print("  [bold cyan]Obtained result:[/]")
        self.diagnostics(obtained, "    ")
        self.console.print()

    def diagnostics(self, diagnostics: list[Diagnostic], indent: str) -> None:
        if not diagnostics:
            self.console.print(Text(f"{indent}Success", style="green"))
            return
        for diagnostic in diagnostics:
            style = "yellow" if "warning" in diagnostic.kind.lower() else "red"
            line = Text(indent)
            line.append(diagnostic.kind, style=style)
            line.append(f": {diagnostic.message}".rstrip())
            self.console.print(line)

    def prompt(self, options: str) -> None:
        self.console.print(f"{options}? ", end="", markup=False)

    def choice_made(self) -> None:
        self.console.print()

    def rerun(self) -> None:
        self.console.print("Re-running test case...")

    def warning(self, message: str) -> None:
        self.err_console.print(Text(message, style="yellow"))
        self.err_console.print()

    def summary(self, session: Session) -> None:
        style = "green" if session.all_passed else "red"
        line = Text("Summary: ")
        line.append(f"{session.success_count}/{session.run_count}", style=style)
        line.append(" tests successful.")
        self.console.print()
        self.console.print(line)
