"""Built-in engine that checks fixtures with the Python compiler."""

import warnings

from ..models import Diagnostic, EngineResult, Fixture
from .base import AnalysisEngine


def _located(message: str, lineno: int | None) -> str:
    return f"line {lineno}: {message}" if lineno else message


class PythonSyntaxEngine(AnalysisEngine):
    """Compile fixture source and report syntax errors and compiler warnings."""

    def run(self, fixture: Fixture) -> EngineResult:
        diagnostics: list[Diagnostic] = []

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                compile(fixture.source, fixture.name, "exec", dont_inherit=True)
            except SyntaxError as e:
                diagnostics.append(Diagnostic(type(e).__name__, _located(e.msg or str(e), e.lineno)))
            except (ValueError, RecursionError, MemoryError) as e:
                # The compiler gave up without a usable error list
                diagnostics.extend(self._warnings(caught))
                diagnostics.append(Diagnostic(type(e).__name__, str(e)))
                return EngineResult(diagnostics=diagnostics, hard_failure=True)

        return EngineResult(diagnostics=self._warnings(caught) + diagnostics)

    @staticmethod
    def _warnings(caught: list[warnings.WarningMessage]) -> list[Diagnostic]:
        return [
            Diagnostic(w.category.__name__, _located(str(w.message), w.lineno))
            for w in caught
        ]
