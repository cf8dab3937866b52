"""Analysis engines - produce diagnostics for fixture sources."""

from ..config import Config
from .base import AnalysisEngine
from .command import CommandEngine
from .python import PythonSyntaxEngine


def create_engine(config: Config) -> AnalysisEngine:
    """Build the engine selected by the configuration."""
    if config.engine.command:
        return CommandEngine(config.engine.command, config.engine.completed_codes)
    return PythonSyntaxEngine()


__all__ = ["AnalysisEngine", "CommandEngine", "PythonSyntaxEngine", "create_engine"]
