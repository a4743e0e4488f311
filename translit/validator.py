"""
Round-trip (reverse test) validation for conversions.
"""

import logging
from typing import Optional

from .result import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)


class RoundTripValidator:
    """
    Verifies that a produced output converts back to the original input.

    The reverse engine is run exactly once and without its own round-trip
    check. A forward conversion with no unknown symbols can still fail here:
    ambiguous tables, passthrough differences between the two directions and
    case variants can all produce output that does not invert.
    """

    def __init__(self, reverse_engine):
        """
        Initialize the validator.

        Args:
            reverse_engine: Engine converting from the target script back to
                the source script.
        """
        self.reverse_engine = reverse_engine

    def verify(self, original: str, produced: str) -> tuple[bool, Optional[Diagnostic]]:
        """
        Convert produced back and compare it with original.

        Args:
            original: The forward input, after pre-normalization.
            produced: The forward output.

        Returns:
            (True, None) when the round trip reproduces original, otherwise
            (False, diagnostic) with a ROUND_TRIP_FAILURE diagnostic.
        """
        remapped = self.reverse_engine.convert(produced)

        if not remapped.ok:
            message = (
                f"reverse test failed: remapping '{produced}' gave "
                + "; ".join(remapped.messages)
            )
            logger.debug(message)
            return False, Diagnostic(DiagnosticKind.ROUND_TRIP_FAILURE, message)

        if remapped.output != original:
            message = (
                f"reverse test failed: input '{original}', "
                f"mapped '{produced}', remapped '{remapped.output}'"
            )
            logger.debug(message)
            return False, Diagnostic(DiagnosticKind.ROUND_TRIP_FAILURE, message)

        return True, None


def verify_round_trip(engine, reverse_engine, original: str, produced: str) -> tuple[bool, Optional[Diagnostic]]:
    """
    Check that reverse_engine maps produced back to original.

    engine is the forward engine that produced the output; it is only used
    to label the log record.
    """
    passed, diagnostic = RoundTripValidator(reverse_engine).verify(original, produced)
    if not passed:
        logger.debug("Round trip failed for engine %s", getattr(engine, "name", engine))
    return passed, diagnostic
