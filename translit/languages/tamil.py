"""
Tamil script <-> Latin transliteration (ISO 15919 style).

Tamil syllables are multi-code-point clusters (consonant, optional virama,
optional vowel sign), so this table relies on longest-match segmentation:
"க்ஷ" (kṣa) must win over "க்" (k) followed by
"ஷ" (ṣa).
"""

from ..core import LanguagePair, build_engine
from ..normalize import nfc
from ..passthrough import DIGITS, NBSP, PassthroughClassifier

NAME = "tamil"

VIRAMA = "\u0BCD"

CONSONANTS = [
    ("க", "k"),
    ("ங", "ṅ"),
    ("ச", "c"),
    ("ஞ", "ñ"),
    ("ட", "ṭ"),
    ("ண", "ṇ"),
    ("த", "t"),
    ("ந", "n"),
    ("ப", "p"),
    ("ம", "m"),
    ("ய", "y"),
    ("ர", "r"),
    ("ல", "l"),
    ("வ", "v"),
    ("ழ", "ḻ"),
    ("ள", "ḷ"),
    ("ற", "ṟ"),
    ("ன", "ṉ"),
    # Grantha
    ("ஜ", "j"),
    ("ஶ", "ś"),
    ("ஷ", "ṣ"),
    ("ஸ", "s"),
    ("ஹ", "h"),
    ("க்ஷ", "kṣ"),
]

# Dependent vowel signs; the empty sign is the inherent a
VOWEL_SIGNS = [
    ("", "a"),
    ("\u0BBE", "ā"),
    ("\u0BBF", "i"),
    ("\u0BC0", "ī"),
    ("\u0BC1", "u"),
    ("\u0BC2", "ū"),
    ("\u0BC6", "e"),
    ("\u0BC7", "ē"),
    ("\u0BC8", "ai"),
    ("\u0BCA", "o"),
    ("\u0BCB", "ō"),
    ("\u0BCC", "au"),
]

VOWELS = [
    ("அ", "a"),
    ("ஆ", "ā"),
    ("இ", "i"),
    ("ஈ", "ī"),
    ("உ", "u"),
    ("ஊ", "ū"),
    ("எ", "e"),
    ("ஏ", "ē"),
    ("ஐ", "ai"),
    ("ஒ", "o"),
    ("ஓ", "ō"),
    ("ஔ", "au"),
]

VISARGA = ("ஃ", "ḵ")

# Tamil digits (U+0BE6..U+0BEF) and the calendar and currency signs are unmapped
PASSTHROUGH = frozenset({
    "'", NBSP, " ", "!", '"', "(", ")", ",", "-", ".", ":", ";", "?",
    "‘", "’", "“", "”",
}) | DIGITS


def symbol_pairs() -> list[tuple[str, str]]:
    """All Tamil -> Latin pairs; Latin sides are NFC so both directions agree."""
    pairs = [VISARGA]
    for cons, latin in CONSONANTS:
        pairs.append((cons + VIRAMA, latin))
    pairs.extend(VOWELS)
    for cons, latin in CONSONANTS:
        for sign, vowel in VOWEL_SIGNS:
            pairs.append((cons + sign, latin + vowel))
    return [(src, nfc(tgt)) for src, tgt in pairs]


def language(verify: bool = True, accept_all_ascii: bool = False, placeholder: str = "?") -> LanguagePair:
    """
    Build the Tamil <-> Latin language pair.

    Args:
        verify: Round-trip check every conversion.
        accept_all_ascii: Let unmapped ASCII characters through. Off by
            default; with it on, Latin letters after Tamil text are glued
            onto the preceding syllable in the reverse direction and the
            round trip fails.
        placeholder: Character emitted for unknown symbols.
    """
    passthrough = PassthroughClassifier(PASSTHROUGH, accept_all_ascii=accept_all_ascii)
    forward = build_engine(
        symbol_pairs(),
        passthrough,
        name="tamil2lat",
        placeholder=placeholder,
        pre_normalize=nfc,
    )
    reverse = forward.inverse(name="lat2tamil", pre_normalize=nfc)
    return LanguagePair(
        NAME,
        forward,
        reverse,
        verify=verify,
        description="Tamil script <-> ISO 15919 style Latin transliteration",
    )
