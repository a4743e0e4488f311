"""
Transliteration engine.

An Engine rewrites text with a fixed symbol table: at every position it
takes the longest known symbol sequence, copies passthrough characters, and
substitutes a placeholder for anything else. A LanguagePair bundles the
forward and reverse engines of one language pair and decides whether
conversions are round-trip verified.
"""

import logging
from typing import Iterable, Mapping, Optional, Union

from .errors import ConfigurationError
from .index import MatchIndex
from .normalize import Hook, identity
from .passthrough import PassthroughClassifier
from .result import ConversionResult, Diagnostic, DiagnosticKind
from .symbols import SymbolTable
from .unicode_info import describe
from .validator import verify_round_trip

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "?"

Entries = Union[SymbolTable, Mapping[str, str], Iterable[tuple[str, str]]]


class Engine:
    """
    Deterministic longest-match rewriter over one symbol table.

    The engine is immutable after construction and keeps no per-call state,
    so one instance can serve many threads.
    """

    def __init__(
        self,
        table: SymbolTable,
        passthrough: PassthroughClassifier,
        name: Optional[str] = None,
        placeholder: str = DEFAULT_PLACEHOLDER,
        pre_normalize: Optional[Hook] = None,
        post_normalize: Optional[Hook] = None,
    ):
        if not isinstance(placeholder, str) or len(placeholder) != 1:
            raise ConfigurationError(f"Placeholder must be a single character, got {placeholder!r}")

        self.table = table
        self.passthrough = passthrough
        self.name = name or "engine"
        self.placeholder = placeholder
        self.pre_normalize = pre_normalize or identity
        self.post_normalize = post_normalize or identity
        self.index = MatchIndex.from_table(table)

        logger.debug(
            "Built engine %s: %d entries, max sequence length %d",
            self.name, len(self.index), self.index.depth,
        )

    def convert(self, text: str) -> ConversionResult:
        """
        Convert text with this engine's table.

        Unknown symbols never raise: each is replaced by the placeholder and
        reported once as an UNMAPPED_SYMBOL diagnostic.

        Args:
            text: Input string.

        Returns:
            ConversionResult with the complete output.
        """
        normalized = self.pre_normalize(text)
        output, unknown = self._segment(normalized)
        output = self.post_normalize(output)

        diagnostics = [
            Diagnostic(
                kind=DiagnosticKind.UNMAPPED_SYMBOL,
                message=f"unknown input symbol '{ch}' ({describe(ch)}) for {self.name}",
                symbol=ch,
            )
            for ch in unknown
        ]
        return ConversionResult(
            input=text,
            output=output,
            ok=not diagnostics,
            diagnostics=diagnostics,
            normalized_input=normalized,
        )

    def _segment(self, text: str) -> tuple[str, list[str]]:
        """Single left-to-right pass; returns the raw output and unknown symbols."""
        out = []
        unknown: dict[str, None] = {}  # ordered set
        i, n = 0, len(text)
        while i < n:
            match = self.index.longest_match(text, i)
            if match is not None:
                out.append(match.target)
                i += match.length
                continue

            ch = text[i]
            if self.passthrough.is_passthrough(ch):
                out.append(ch)
            else:
                out.append(self.placeholder)
                unknown.setdefault(ch)
            i += 1
        return "".join(out), list(unknown)

    def inverse(
        self,
        passthrough: Optional[PassthroughClassifier] = None,
        name: Optional[str] = None,
        pre_normalize: Optional[Hook] = None,
        post_normalize: Optional[Hook] = None,
    ) -> "Engine":
        """
        Engine for the opposite direction, built from the inverted table.

        The passthrough set defaults to this engine's; hooks default to none.
        """
        return Engine(
            self.table.inverted(),
            passthrough if passthrough is not None else self.passthrough,
            name=name or f"{self.name}-reverse",
            placeholder=self.placeholder,
            pre_normalize=pre_normalize,
            post_normalize=post_normalize,
        )

    def __call__(self, text: str) -> ConversionResult:
        return self.convert(text)

    def __repr__(self) -> str:
        return f"Engine({self.name!r}, {len(self.index)} entries)"


def build_engine(
    entries: Entries,
    passthrough: Union[PassthroughClassifier, Iterable[str]] = (),
    case_variants: bool = False,
    *,
    name: Optional[str] = None,
    placeholder: str = DEFAULT_PLACEHOLDER,
    pre_normalize: Optional[Hook] = None,
    post_normalize: Optional[Hook] = None,
) -> Engine:
    """
    Build an Engine from static table data.

    Args:
        entries: A SymbolTable, a source -> target mapping, or (source,
            target) pairs.
        passthrough: A PassthroughClassifier or the passthrough characters.
        case_variants: Add Latin case variants of every entry.
        name: Label used in diagnostics and logs.
        placeholder: Character emitted for unknown symbols.
        pre_normalize: Hook applied to the input before segmentation.
        post_normalize: Hook applied to the output after segmentation.

    Returns:
        The constructed Engine.

    Raises:
        ConfigurationError: On an empty source sequence or a bad placeholder.
    """
    if isinstance(entries, SymbolTable):
        if case_variants:
            table = SymbolTable.from_pairs(
                ((e.source, e.target) for e in entries), case_variants=True
            )
        else:
            table = entries
    elif isinstance(entries, Mapping):
        table = SymbolTable.from_mapping(entries, case_variants=case_variants)
    else:
        table = SymbolTable.from_pairs(entries, case_variants=case_variants)

    if not isinstance(passthrough, PassthroughClassifier):
        passthrough = PassthroughClassifier(passthrough)

    return Engine(
        table,
        passthrough,
        name=name,
        placeholder=placeholder,
        pre_normalize=pre_normalize,
        post_normalize=post_normalize,
    )


def convert_with_verification(forward: Engine, reverse: Engine, text: str) -> ConversionResult:
    """
    Convert text with forward, then check that reverse maps it back.

    The round-trip check only runs when the forward conversion found no
    unknown symbols. A failed check keeps the forward output, sets ok to
    False and adds a ROUND_TRIP_FAILURE diagnostic.
    """
    result = forward.convert(text)
    if not result.ok:
        return result

    passed, diagnostic = verify_round_trip(forward, reverse, result.normalized_input, result.output)
    if passed:
        return result
    return result.with_diagnostic(diagnostic)


class LanguagePair:
    """
    The engines of one language pair.

    convert() goes from the native script to the transliteration, revert()
    goes back. When verify is on, both directions are round-trip checked
    against the opposite engine.
    """

    def __init__(
        self,
        name: str,
        forward: Engine,
        reverse: Optional[Engine] = None,
        verify: bool = False,
        description: str = "",
    ):
        if verify and reverse is None:
            raise ConfigurationError(f"Language pair {name} requires a reverse table for verification")
        self.name = name
        self.forward = forward
        self.reverse = reverse
        self.verify = verify
        self.description = description

    def convert(self, text: str, verify: Optional[bool] = None) -> ConversionResult:
        """
        Transliterate text from the source script.

        Args:
            text: Input string.
            verify: Override the pair's round-trip setting for this call.
                Asking a one-way pair to verify gives a ROUND_TRIP_FAILURE
                diagnostic on the result.
        """
        verify = self.verify if verify is None else verify
        if verify and self.reverse is not None:
            return convert_with_verification(self.forward, self.reverse, text)
        result = self.forward.convert(text)
        if verify and result.ok:
            return result.with_diagnostic(Diagnostic(
                kind=DiagnosticKind.ROUND_TRIP_FAILURE,
                message=f"cannot verify: language pair {self.name} has no reverse table",
            ))
        return result

    def revert(self, text: str, verify: Optional[bool] = None) -> ConversionResult:
        """
        Convert text from the transliteration back to the source script.

        Raises:
            ConfigurationError: If the pair has no reverse table.
        """
        if self.reverse is None:
            raise ConfigurationError(f"Language pair {self.name} has no reverse table")
        verify = self.verify if verify is None else verify
        if verify:
            return convert_with_verification(self.reverse, self.forward, text)
        return self.reverse.convert(text)

    @property
    def reversible(self) -> bool:
        return self.reverse is not None

    def __repr__(self) -> str:
        return f"LanguagePair({self.name!r}, reversible={self.reversible}, verify={self.verify})"
