"""Run a single fixture against the analysis engine."""

from pathlib import PurePath

from .config import FixtureFormatConfig
from .engines import AnalysisEngine
from .errors import FixtureError
from .fixture import load_fixture
from .models import Outcome, Resolution, Session
from .report import ConsoleReporter
from .resolver import Resolver
from .store import FixtureStore


class FixtureRunner:
    """Run fixtures, handing failures to the resolver until they settle."""

    def __init__(
        self,
        engine: AnalysisEngine,
        store: FixtureStore,
        reporter: ConsoleReporter,
        resolver: Resolver,
        session: Session,
        fmt: FixtureFormatConfig,
    ):
        self.engine = engine
        self.store = store
        self.reporter = reporter
        self.resolver = resolver
        self.session = session
        self.fmt = fmt

    def run(self, name: str, path: PurePath) -> Outcome:
        """Run one fixture; re-runs after edit or update happen here too.

        The caller counts the run. Success is counted once, when the fixture
        finally passes.
        """
        while True:
            self.reporter.announce(name)

            try:
                fixture = load_fixture(self.store, name, path, self.fmt)
            except FixtureError as e:
                self.reporter.cannot_read(e)
                return Outcome.CONTINUE

            result = self.engine.run(fixture)
            fixture.has_hard_failure = result.hard_failure

            if result.matches(fixture):
                self.reporter.ok()
                self.session.record_success()
                return Outcome.CONTINUE

            self.reporter.fail()
            self.reporter.source(fixture)
            if fixture.has_hard_failure:
                self.reporter.hard_failure(result)
            else:
                self.reporter.mismatch(fixture.expectations, result.diagnostics)

            resolution = self.resolver.resolve(fixture, result)
            if resolution is Resolution.SKIP:
                return Outcome.CONTINUE
            if resolution is Resolution.QUIT:
                return Outcome.ABORT

            self.reporter.rerun()
