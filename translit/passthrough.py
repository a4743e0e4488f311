"""
Passthrough classification for unmapped code points.

Script-neutral characters (spaces, punctuation, sometimes digits) are copied
unchanged from input to output instead of being reported as unknown.
"""

from typing import Iterable

NBSP = "\u00a0"

DIGITS = frozenset("0123456789")

# Space, no-break space and the ASCII punctuation shared by most tables
COMMON_PUNCTUATION = frozenset({" ", NBSP, ".", ",", "(", ")"})


class PassthroughClassifier:
    """
    Decides whether a single unmapped code point may pass through unchanged.

    accept_all_ascii is off by default: letting every ASCII character
    through breaks the round-trip check for tables that map ASCII letters
    in the reverse direction (the Tamil Latin side, for instance).
    """

    def __init__(
        self,
        chars: Iterable[str] = (),
        accept_all_ascii: bool = False,
        accept_any: bool = False,
    ):
        chars = frozenset(chars)
        for ch in chars:
            if len(ch) != 1:
                raise ValueError(f"Passthrough entries must be single code points, got {ch!r}")
        self.chars = chars
        self.accept_all_ascii = accept_all_ascii
        self.accept_any = accept_any

    def is_passthrough(self, ch: str) -> bool:
        if self.accept_any:
            return True
        if ch in self.chars:
            return True
        return self.accept_all_ascii and ord(ch) < 128

    __call__ = is_passthrough

    @classmethod
    def everything(cls) -> "PassthroughClassifier":
        """Classifier that lets every code point through."""
        return cls(accept_any=True)

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and len(ch) == 1 and self.is_passthrough(ch)

    def __repr__(self) -> str:
        return (
            f"PassthroughClassifier({len(self.chars)} chars, "
            f"accept_all_ascii={self.accept_all_ascii}, accept_any={self.accept_any})"
        )
