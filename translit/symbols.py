"""
Symbol tables and Latin case-variant expansion.

A symbol table is an ordered, immutable list of (source, target) entries.
Sources are one or more code points; targets are arbitrary strings.
"""

import logging
import unicodedata
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def upcase(s: str) -> str:
    return s.upper()


def upcase_initial(s: str) -> str:
    """Upper-case the first character, lower-case the rest."""
    if not s:
        return s
    return s[0].upper() + s[1:].lower()


def upcase_initials(s: str) -> list[str]:
    """
    All variants of s with a leading group upper-cased and the rest lower-cased.

    For a string of length L this gives the variants for split points 1..L-1.
    A single character gives its upper-case form; the empty string gives [""].
    """
    if len(s) == 0:
        return [s]
    if len(s) == 1:
        return [upcase_initial(s)]
    return [s[:i].upper() + s[i:].lower() for i in range(1, len(s))]


def expand_case_variants(source: str, target: str) -> list[tuple[str, str]]:
    """
    Cased variants of one symbol pair, for every split point 1..len(source).

    The first i code points of the source are upper-cased and the rest
    lower-cased. The target gets an initial capital, or is fully upper-cased
    when the whole of a multi-character source is. Cased sources are NFC,
    since upper-casing can decompose (ΐ gives Ι, U+0308, U+0301).
    """
    if len(source) == 1:
        variants = [(upcase_initial(source), upcase_initial(target))]
    else:
        variants = [(cased, upcase_initial(target)) for cased in upcase_initials(source)]
        variants.append((upcase(source), upcase(target)))
    return [(unicodedata.normalize("NFC", s), t) for s, t in variants]


@dataclass(frozen=True)
class SymbolEntry:
    """One transliteration unit: a source symbol sequence and its target."""
    source: str
    target: str

    def __post_init__(self):
        if not isinstance(self.source, str) or len(self.source) == 0:
            raise ConfigurationError(f"Symbol source must be a non-empty string, got {self.source!r}")
        if not isinstance(self.target, str):
            raise ConfigurationError(f"Symbol target must be a string, got {self.target!r}")

    def swapped(self) -> "SymbolEntry":
        return SymbolEntry(source=self.target, target=self.source)


class SymbolTable:
    """
    Immutable, ordered collection of symbol entries.

    When two entries share a source, the one declared first is kept.
    """

    def __init__(self, entries: Iterable[SymbolEntry] = ()):
        kept: dict[str, SymbolEntry] = {}
        for entry in entries:
            if entry.source in kept:
                if kept[entry.source].target != entry.target:
                    logger.debug(
                        "Dropping duplicate source %r -> %r (keeping %r)",
                        entry.source, entry.target, kept[entry.source].target,
                    )
                continue
            kept[entry.source] = entry
        self._entries = tuple(kept.values())
        self._by_source = {e.source: e.target for e in self._entries}

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, str]],
        case_variants: bool = False,
    ) -> "SymbolTable":
        """
        Build a table from (source, target) pairs.

        Args:
            pairs: Base symbol pairs in declaration order.
            case_variants: If True, add the cased variants of every pair
                after the pair itself.

        Returns:
            The expanded SymbolTable.

        Raises:
            ConfigurationError: If a source is empty.
        """
        entries = []
        for source, target in pairs:
            entries.append(SymbolEntry(source, target))
            if case_variants:
                for cased_source, cased_target in expand_case_variants(source, target):
                    entries.append(SymbolEntry(cased_source, cased_target))
        return cls(entries)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], case_variants: bool = False) -> "SymbolTable":
        return cls.from_pairs(mapping.items(), case_variants=case_variants)

    def inverted(self) -> "SymbolTable":
        """
        Build the reverse table by swapping source and target of every entry.

        Ambiguous forward entries (several sources with one target) keep the
        first source; the round-trip validator is what reports the loss.
        """
        for entry in self._entries:
            if entry.target == "":
                raise ConfigurationError(
                    f"Cannot invert entry {entry.source!r}: target is empty"
                )
        return SymbolTable(entry.swapped() for entry in self._entries)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, source: object) -> bool:
        return source in self._by_source

    def __repr__(self) -> str:
        return f"SymbolTable({len(self)} entries)"
