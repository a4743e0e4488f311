"""
Modern Greek -> Latin transliteration.

A simplified version of ALA-LC romanization. Word-initial γκ, μπ and ντ
are pronounced g, b and d and are rewritten before the table lookup; the
Latin letters they leave behind pass through unchanged.

Reference: https://en.wikipedia.org/wiki/Romanization_of_Greek#Modern_Greek
"""

import string

from ..core import LanguagePair, build_engine
from ..normalize import chain, nfc, regex_rewrite
from ..passthrough import PassthroughClassifier

NAME = "greek"

_WORD_START = r"(^|[\s/()'\".!?-])"

WORD_INITIAL_RULES = [
    (_WORD_START + r"Γ[Κκ](?=.)", r"\1G"),
    (_WORD_START + r"Μ[Ππ](?=.)", r"\1B"),
    (_WORD_START + r"Ν[Ττ](?=.)", r"\1D"),
    (_WORD_START + r"(?i:γκ)(?=.)", r"\1g"),
    (_WORD_START + r"(?i:μπ)(?=.)", r"\1b"),
    (_WORD_START + r"(?i:ντ)(?=.)", r"\1d"),
]

MAPTABLE = [
    ("αι", "ai"),
    ("ει", "ei"),
    ("οι", "oi"),
    ("υι", "yi"),

    ("αυ", "au"),
    ("ευ", "eu"),
    ("ου", "ou"),

    ("αύ", "au"),
    ("εύ", "eú"),
    ("ού", "oú"),
    ("άυ", "áu"),
    ("έυ", "éu"),
    ("όυ", "óu"),

    ("ήυ", "íy"),
    ("υί", "yí"),
    ("ηυ", "iy"),

    ("ωυ", "oy"),
    ("ώυ", "óy"),

    ("μμπ", "mb"),
    ("νντ", "nd"),

    ("ά", "á"),
    ("έ", "é"),
    ("ή", "í"),
    ("ί", "í"),
    ("ύ", "í"),
    ("ό", "ó"),
    ("ώ", "ó"),
    ("ϊ", "ï"),
    ("ΐ", "ḯ"),
    ("ϋ", "ü"),
    ("ΰ", "ǘ"),

    ("α", "a"),
    ("β", "v"),
    ("γγ", "ng"),
    ("γκ", "nk"),
    ("γξ", "nx"),
    ("γχ", "nch"),
    ("γ", "g"),
    ("δ", "d"),
    ("ε", "e"),
    ("ζ", "z"),
    ("η", "i"),
    ("θ", "th"),
    ("ι", "i"),
    ("κ", "k"),
    ("λ", "l"),
    ("μ", "m"),
    ("ν", "n"),
    ("ξ", "x"),
    ("ο", "o"),
    ("π", "p"),
    ("ρ", "r"),
    ("ς", "s"),
    ("σ", "s"),
    ("τ", "t"),
    ("υ", "y"),
    ("φ", "f"),
    ("χ", "ch"),
    ("ψ", "ps"),
    ("ω", "o"),
]

PASSTHROUGH = frozenset({
    " ", "\t", ",", ".", "?", "!", "–", "-", ":", ";", "&", "/", "'",
}) | frozenset(string.ascii_letters + string.digits + "()@΄$ï*_")


def language(placeholder: str = "?") -> LanguagePair:
    """Build the Greek -> Latin language pair (no reverse direction)."""
    forward = build_engine(
        [(nfc(src), nfc(tgt)) for src, tgt in MAPTABLE],
        PassthroughClassifier(PASSTHROUGH),
        case_variants=True,
        name="grc2lat",
        placeholder=placeholder,
        pre_normalize=chain(nfc, regex_rewrite(WORD_INITIAL_RULES)),
    )
    return LanguagePair(
        NAME,
        forward,
        description="Modern Greek -> Latin transliteration (simplified ALA-LC)",
    )
