"""
Longest-prefix matching index over symbol sequences.

A character trie: every node is keyed by one code point, owns its children,
and carries a target string when the path from the root spells a complete
source sequence.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .symbols import SymbolTable


@dataclass(frozen=True)
class Match:
    """A symbol sequence found at some input position."""
    length: int
    target: str


class MatchNode:
    """One code point in the trie."""

    __slots__ = ("char", "children", "value")

    def __init__(self, char: str = ""):
        self.char = char
        self.children: dict[str, "MatchNode"] = {}
        self.value: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.value is not None

    def __repr__(self) -> str:
        return f"MatchNode({self.char!r}, children={len(self.children)}, value={self.value!r})"


class MatchIndex:
    """
    Trie over all source sequences of a symbol table.

    Lookup cost is bounded by the length of the match, not the table size.
    """

    def __init__(self):
        self.root = MatchNode()
        self._size = 0
        self._depth = 0

    @classmethod
    def from_table(cls, table: SymbolTable) -> "MatchIndex":
        index = cls()
        for entry in table:
            index.insert(entry.source, entry.target)
        return index

    def insert(self, source: str, target: str) -> None:
        """
        Add one source sequence to the index.

        Re-inserting a known source replaces its target.

        Raises:
            ConfigurationError: If the source is empty.
        """
        if not source:
            raise ConfigurationError("Cannot index an empty source sequence")

        node = self.root
        for ch in source:
            child = node.children.get(ch)
            if child is None:
                child = MatchNode(ch)
                node.children[ch] = child
            node = child

        if not node.is_terminal:
            self._size += 1
        node.value = target
        self._depth = max(self._depth, len(source))

    def longest_match(self, text: str, position: int = 0) -> Optional[Match]:
        """
        Find the longest known sequence starting at text[position].

        Descends greedily and remembers the deepest terminal node passed on
        the way. There is no backtracking: if the walk dead-ends, the last
        terminal seen is the answer.

        Args:
            text: Input string.
            position: Index of the first code point to match.

        Returns:
            A Match, or None if no known sequence starts at position.
        """
        node = self.root
        best: Optional[Match] = None
        i = position
        end = len(text)
        while i < end:
            node = node.children.get(text[i])
            if node is None:
                break
            i += 1
            if node.value is not None:
                best = Match(length=i - position, target=node.value)
        return best

    @property
    def depth(self) -> int:
        """Length of the longest indexed sequence."""
        return self._depth

    def __contains__(self, source: object) -> bool:
        if not isinstance(source, str) or not source:
            return False
        node = self.root
        for ch in source:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_terminal

    def __len__(self) -> int:
        return self._size
