"""
Persian script -> Latin transliteration.

Romanization after the Encyclopaedia Iranica scheme (EI 2012). Several
Persian spellings share a romanization, so there is no reverse table.
"""

import string

from ..core import LanguagePair, build_engine
from ..normalize import nfc
from ..passthrough import COMMON_PUNCTUATION, PassthroughClassifier

NAME = "persian"

MAPTABLE = [
    # Consonants
    ("ا", "’"),  # alef; should not be written word-initially
    ("ب", "b"),
    ("پ", "p"),
    ("ت", "t"),
    ("ث", "ṯ"),
    ("ج", "j"),
    ("چ", "č"),
    ("ح", "ḥ"),
    ("خ", "ḵ"),
    ("د", "d"),
    ("ذ", "ḏ"),
    ("ر", "r"),
    ("ز", "z"),
    ("ژ", "ž"),
    ("س", "s"),
    ("ش", "š"),
    ("ص", "ṣ"),
    ("ض", "ż"),
    ("ط", "ṭ"),
    ("ظ", "ẓ"),
    ("ع", "‘"),
    ("غ", "ḡ"),
    ("ف", "f"),
    ("ق", "ḳ"),
    ("ک", "k"),
    ("گ", "g"),
    ("ل", "l"),
    ("م", "m"),
    ("ن", "n"),
    ("و", "v"),
    ("ه", "h"),
    ("ة", "h"),
    ("ی", "y"),
    ("ء", "’"),
    ("ؤ", "’"),
    ("ئ", "’"),

    # Vowels
    ("\u064E", "a"),
    ("\u064F", "u"),
    ("\u0648\u064F", "u"),
    ("\u0650", "e"),
    ("\u064E\u0627", "ā"),
    ("\u0622", "ā"),
    ("\u064E\u06CC", "ā"),
    ("\u06CC\u0670", "ā"),
    ("\u064F\u0648", "u"),
    ("\u0650\u06CC", "i"),
    ("\u064E\u0648", "ow"),
    ("\u064E\u06CC", "ey"),  # shadowed by fatha + yeh -> ā above
    ("\u064E\u06CC", "–e"),  # shadowed by fatha + yeh -> ā above
    ("\u06C0", "–ye"),
]

PASSTHROUGH = COMMON_PUNCTUATION | frozenset(
    string.ascii_letters + string.digits + "()@΄$ï*'_"
)


def language(placeholder: str = "?") -> LanguagePair:
    """Build the Persian -> Latin language pair (no reverse direction)."""
    forward = build_engine(
        [(src, nfc(tgt)) for src, tgt in MAPTABLE],
        PassthroughClassifier(PASSTHROUGH),
        name="far2lat",
        placeholder=placeholder,
        pre_normalize=nfc,
    )
    return LanguagePair(
        NAME,
        forward,
        description="Persian script -> Latin transliteration (Encyclopaedia Iranica)",
    )
