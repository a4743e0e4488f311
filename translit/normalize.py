"""
Pre- and post-normalization hooks.

Every hook is a pure str -> str function. Engines call their hooks around
the segmentation pass; the builders here cover what the language tables need.
"""

import re
import unicodedata
from typing import Callable, Iterable, Mapping

Hook = Callable[[str], str]


def identity(s: str) -> str:
    return s


def nfc(s: str) -> str:
    """Canonical composition (NFC)."""
    return unicodedata.normalize("NFC", s)


def chain(*hooks: Hook) -> Hook:
    """Compose hooks left to right."""
    hooks = tuple(h for h in hooks if h is not None)
    if not hooks:
        return identity
    if len(hooks) == 1:
        return hooks[0]

    def run(s: str) -> str:
        for hook in hooks:
            s = hook(s)
        return s

    return run


def replace_all(mapping: Mapping[str, str]) -> Hook:
    """Hook replacing every occurrence of each key by its value, in order."""
    items = tuple(mapping.items())

    def run(s: str) -> str:
        for old, new in items:
            s = s.replace(old, new)
        return s

    return run


def regex_rewrite(rules: Iterable[tuple[str, str]], flags: int = 0) -> Hook:
    """
    Hook applying (pattern, replacement) regex rules in order.

    Each rule sees the output of the previous one.
    """
    compiled = tuple((re.compile(pattern, flags), repl) for pattern, repl in rules)

    def run(s: str) -> str:
        for pattern, repl in compiled:
            s = pattern.sub(repl, s)
        return s

    return run
