"""
Line-by-line batch conversion.

Lines are independent, so they can be spread over a thread pool that shares
one read-only LanguagePair.
"""

import logging
from collections import Counter, deque
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .core import LanguagePair
from .errors import ConfigurationError
from .result import ConversionResult

logger = logging.getLogger(__name__)


@dataclass
class BatchReport:
    """Counts of converted and failed lines."""
    processed: int = 0
    converted: int = 0
    failed: int = 0
    failures_by_kind: Counter = field(default_factory=Counter)

    def add(self, result: ConversionResult) -> None:
        self.processed += 1
        if result.ok:
            self.converted += 1
            return
        self.failed += 1
        for kind in {d.kind for d in result.diagnostics}:
            self.failures_by_kind[kind.value] += 1

    def summary(self) -> str:
        plural = "" if self.processed == 1 else "s"
        lines = [
            f"PROCESSED {self.processed:7d} line{plural}",
            f"   FAILED {self.failed:7d}",
        ]
        for label, count in self.failures_by_kind.most_common():
            lines.append(f"        : {count:7d} {label}")
        lines.append(f"CONVERTED {self.converted:7d}")
        return "\n".join(lines)


class BatchProcessor:
    """
    Converts many lines with one language pair.

    Results come back in input order whatever the number of workers. With
    several workers at most workers * WINDOW_PER_WORKER lines are in flight,
    so input is read only as fast as results are consumed.
    """

    WINDOW_PER_WORKER = 4

    def __init__(self, pair: LanguagePair, workers: int = 1, reverse: bool = False):
        """
        Initialize the processor.

        Args:
            pair: The language pair to convert with.
            workers: Number of worker threads; 1 converts in the calling thread.
            reverse: Convert from the transliteration back to the source script.

        Raises:
            ConfigurationError: If reverse is set for a one-way pair.
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        if reverse and not pair.reversible:
            raise ConfigurationError(f"Language {pair.name} has no reverse conversion")
        self.pair = pair
        self.workers = workers
        self.reverse = reverse
        self.report = BatchReport()

    def _convert(self, line: str) -> ConversionResult:
        if self.reverse:
            return self.pair.revert(line)
        return self.pair.convert(line)

    def process(self, lines: Iterable[str]) -> Iterator[ConversionResult]:
        """Convert lines, updating self.report as results are consumed."""
        if self.workers == 1:
            for result in map(self._convert, lines):
                self.report.add(result)
                yield result
            return

        logger.info("Converting with %d worker threads", self.workers)
        window = self.workers * self.WINDOW_PER_WORKER
        pending = deque()
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            try:
                for line in lines:
                    pending.append(executor.submit(self._convert, line))
                    if len(pending) >= window:
                        yield self._collect(pending.popleft())
                while pending:
                    yield self._collect(pending.popleft())
            finally:
                # consumer stopped early
                for future in pending:
                    future.cancel()

    def _collect(self, future: Future) -> ConversionResult:
        result = future.result()
        self.report.add(result)
        return result
