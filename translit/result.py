"""
Conversion result data structures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class DiagnosticKind(Enum):
    """Kinds of per-conversion problems."""
    UNMAPPED_SYMBOL = "unmapped_symbol"
    ROUND_TRIP_FAILURE = "round_trip_failure"


@dataclass(frozen=True)
class Diagnostic:
    """A single problem found while converting one input."""
    kind: DiagnosticKind
    message: str
    symbol: Optional[str] = None  # Set for UNMAPPED_SYMBOL

    def __str__(self) -> str:
        return self.message


@dataclass
class ConversionResult:
    """
    Outcome of converting one input string.

    output is always complete: unknown symbols are replaced by the
    placeholder character rather than dropped.
    """
    input: str
    output: str
    ok: bool = True
    diagnostics: list[Diagnostic] = field(default_factory=list)
    normalized_input: Optional[str] = None  # Input after pre-normalization

    def __post_init__(self):
        if self.normalized_input is None:
            self.normalized_input = self.input

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]

    @property
    def unmapped_symbols(self) -> list[str]:
        return [
            d.symbol for d in self.diagnostics
            if d.kind == DiagnosticKind.UNMAPPED_SYMBOL and d.symbol is not None
        ]

    @property
    def round_trip_failed(self) -> bool:
        return any(d.kind == DiagnosticKind.ROUND_TRIP_FAILURE for d in self.diagnostics)

    def with_diagnostic(self, diagnostic: Diagnostic) -> "ConversionResult":
        """Copy of this result with one more diagnostic and ok set to False."""
        return ConversionResult(
            input=self.input,
            output=self.output,
            ok=False,
            diagnostics=self.diagnostics + [diagnostic],
            normalized_input=self.normalized_input,
        )

    def to_dict(self) -> dict:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            "input": self.input,
            "output": self.output,
            "ok": self.ok,
            "diagnostics": [
                {
                    "kind": d.kind.value,
                    "message": d.message,
                    "symbol": d.symbol,
                }
                for d in self.diagnostics
            ],
        }
