from __future__ import annotations

from dataclasses import dataclass, field

from goldbach_pair.adapters.log_sinks import NullLogSink
from goldbach_pair.domain.parsing import InputParseError, parse_even
from goldbach_pair.domain.reasons import ErrorKind
from goldbach_pair.domain.results import Found, Rejected, SolveOutcome, Solved
from goldbach_pair.observability.logging import LogMessage, is_enabled
from goldbach_pair.ports.log_sink import LogSink
from goldbach_pair.services.goldbach_search import GoldbachSearcher
from goldbach_pair.usecases.config_models import SUPPORTED_MAX_EVEN, AppConfig

_EXHAUSTED_MESSAGE = "Search limit exceeded. Try a different E."


@dataclass(slots=True)
class SolveGoldbach:
    # Boundary orchestrator: validate text, run the searcher, map the outcome.
    searcher: GoldbachSearcher = field(default_factory=GoldbachSearcher)
    max_even: int = SUPPORTED_MAX_EVEN
    log_sink: LogSink = field(default_factory=NullLogSink)
    log_level: str = "info"

    @classmethod
    def from_config(cls, config: AppConfig, *, log_sink: LogSink | None = None) -> SolveGoldbach:
        return cls(
            searcher=GoldbachSearcher(step_limit=config.search.step_limit),
            max_even=config.search.max_even,
            log_sink=log_sink if log_sink is not None else NullLogSink(),
            log_level=config.logging.level,
        )

    def __call__(self, text: str) -> SolveOutcome:
        raw = text if isinstance(text, str) else repr(text)
        self._log("debug", "solve.start", input=raw)

        try:
            even = parse_even(text, max_even=self.max_even)
        except InputParseError as exc:
            self._log("info", "solve.rejected", input=raw, error=exc.reason.value)
            return Rejected(raw=raw, error=exc.reason, message=str(exc))

        result = self.searcher.search(even)
        if isinstance(result, Found):
            self._log(
                "info",
                "solve.found",
                even=str(even),
                p=str(result.p),
                q=str(result.q),
                t=str(result.t),
            )
            return Solved(raw=raw, even=even, found=result)

        self._log("info", "solve.exhausted", even=str(even), steps=result.steps)
        return Rejected(raw=raw, error=ErrorKind.SEARCH_EXHAUSTED, message=_EXHAUSTED_MESSAGE)

    def _log(self, level: str, message: str, **fields: object) -> None:
        if is_enabled(level, self.log_level):
            self.log_sink.emit(LogMessage(level=level, message=message, fields=dict(fields)))


def solve(text: str, *, step_limit: int | None = None) -> SolveOutcome:
    # One-shot entry point with default configuration and no logging.
    searcher = GoldbachSearcher() if step_limit is None else GoldbachSearcher(step_limit=step_limit)
    return SolveGoldbach(searcher=searcher)(text)
