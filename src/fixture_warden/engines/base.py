"""Base interface for analysis engines."""

from abc import ABC, abstractmethod

from ..models import EngineResult, Fixture


class AnalysisEngine(ABC):
    """Abstract base class for analysis engines."""

    @abstractmethod
    def run(self, fixture: Fixture) -> EngineResult:
        """
        Analyze the fixture's source.

        Returns:
            EngineResult with the produced diagnostics. ``hard_failure`` is set
            when the engine could not complete and the diagnostics are only
            whatever it reported before giving up.
        """
        pass
