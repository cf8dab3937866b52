"""Recursive fixture discovery."""

from fnmatch import fnmatch
from pathlib import PurePath

from .config import DiscoveryConfig
from .models import Outcome, Session
from .runner import FixtureRunner
from .store import FixtureStore


class FixtureWalker:
    """Walk a fixture tree depth first, running every fixture file found."""

    def __init__(
        self,
        root: PurePath,
        store: FixtureStore,
        runner: FixtureRunner,
        session: Session,
        discovery: DiscoveryConfig,
    ):
        self.root = root
        self.store = store
        self.runner = runner
        self.session = session
        self.discovery = discovery

    def walk(self, relative: PurePath = PurePath()) -> Outcome:
        """Run everything under ``root / relative``; stop at the first abort."""
        full_path = self.root / relative

        if not self.store.is_dir(full_path):
            self.session.record_run()
            return self.runner.run(str(relative), full_path)

        for entry in sorted(self.store.list_dir(full_path)):
            if not self._wanted(entry, self.store.is_dir(full_path / entry)):
                continue
            if self.walk(relative / entry) is Outcome.ABORT:
                return Outcome.ABORT

        return Outcome.CONTINUE

    def _wanted(self, entry: str, is_dir: bool) -> bool:
        if any(fnmatch(entry, pattern) for pattern in self.discovery.exclude):
            return False
        return is_dir or any(fnmatch(entry, pattern) for pattern in self.discovery.patterns)
