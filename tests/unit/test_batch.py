"""
Unit tests for batch processing.
"""

import itertools

import pytest

from translit.batch import BatchProcessor, BatchReport
from translit.errors import ConfigurationError
from translit.result import ConversionResult, Diagnostic, DiagnosticKind
from tests.fixtures import TAMIL_BROKEN, TAMIL_LINES, TAMIL_LINES_LATIN


class TestBatchProcessor:
    """Tests for BatchProcessor."""

    def test_sequential(self, tamil):
        """Test converting lines in the calling thread."""
        processor = BatchProcessor(tamil)
        results = list(processor.process(TAMIL_LINES))
        assert [r.output for r in results] == TAMIL_LINES_LATIN

    @pytest.mark.parametrize("workers", [2, 4])
    def test_thread_pool_keeps_order(self, tamil, workers):
        """Test that results come back in input order with several workers."""
        lines = TAMIL_LINES * 25
        processor = BatchProcessor(tamil, workers=workers)
        results = list(processor.process(lines))
        assert [r.output for r in results] == TAMIL_LINES_LATIN * 25
        assert processor.report.processed == len(lines)

    def test_reverse(self, tamil):
        """Test converting back to the source script."""
        processor = BatchProcessor(tamil, reverse=True)
        results = list(processor.process(TAMIL_LINES_LATIN))
        assert [r.output for r in results] == TAMIL_LINES

    def test_report_counts(self, tamil):
        """Test the report after a mixed batch."""
        processor = BatchProcessor(tamil)
        list(processor.process(TAMIL_LINES + [TAMIL_BROKEN, "abc"]))
        report = processor.report
        assert report.processed == 6
        assert report.converted == 4
        assert report.failed == 2
        assert report.failures_by_kind["unmapped_symbol"] == 2

    def test_lazy(self, tamil):
        """Test that lines are converted as results are consumed."""
        processor = BatchProcessor(tamil)
        results = processor.process(iter(TAMIL_LINES))
        next(results)
        assert processor.report.processed == 1

    def test_thread_pool_reads_input_lazily(self, tamil):
        """Test that an endless input gives results without being drained."""
        pulled = []

        def endless():
            for n in itertools.count():
                pulled.append(n)
                yield TAMIL_LINES[n % len(TAMIL_LINES)]

        processor = BatchProcessor(tamil, workers=2)
        results = processor.process(endless())
        first = next(results)
        results.close()

        assert first.output == TAMIL_LINES_LATIN[0]
        assert len(pulled) <= 2 * BatchProcessor.WINDOW_PER_WORKER

    def test_reverse_one_way_pair(self, persian):
        """Test that a one-way pair cannot be set up for reverse conversion."""
        with pytest.raises(ConfigurationError, match="no reverse conversion"):
            BatchProcessor(persian, reverse=True)

    def test_invalid_workers(self, tamil):
        """Test that at least one worker is required."""
        with pytest.raises(ValueError):
            BatchProcessor(tamil, workers=0)


class TestBatchReport:
    """Tests for BatchReport."""

    def test_kinds_counted_once_per_line(self):
        """Test that a line with two unknown symbols counts once."""
        report = BatchReport()
        diagnostics = [
            Diagnostic(DiagnosticKind.UNMAPPED_SYMBOL, "x", symbol="x"),
            Diagnostic(DiagnosticKind.UNMAPPED_SYMBOL, "y", symbol="y"),
        ]
        report.add(ConversionResult("xy", "??", ok=False, diagnostics=diagnostics))
        assert report.failures_by_kind["unmapped_symbol"] == 1

    def test_summary(self):
        """Test the summary text."""
        report = BatchReport()
        report.add(ConversionResult("a", "a"))
        report.add(ConversionResult(
            "b", "b", ok=False,
            diagnostics=[Diagnostic(DiagnosticKind.ROUND_TRIP_FAILURE, "reverse test failed")],
        ))
        lines = report.summary().splitlines()
        assert lines[0] == "PROCESSED       2 lines"
        assert lines[1] == "   FAILED       1"
        assert lines[2] == "        :       1 round_trip_failure"
        assert lines[3] == "CONVERTED       1"

    def test_summary_single_line(self):
        """Test the singular form."""
        report = BatchReport()
        report.add(ConversionResult("a", "a"))
        assert report.summary().splitlines()[0] == "PROCESSED       1 line"
