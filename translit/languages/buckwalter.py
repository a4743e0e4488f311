"""
Arabic <-> Buckwalter transliteration.

One code point maps to one code point in both directions, so the matching
index for this table is one level deep. Both directions are round-trip
verified.

Reference: http://www.qamus.org/transliteration.htm
"""

from dataclasses import dataclass

from ..core import LanguagePair, build_engine
from ..normalize import nfc, regex_rewrite, replace_all
from ..passthrough import COMMON_PUNCTUATION, PassthroughClassifier
from ..unicode_info import describe

NAME = "buckwalter"

CHARSET = [
    ("ا", "A"),  # bare alif
    ("ب", "b"),
    ("ت", "t"),
    ("ث", "v"),
    ("ج", "j"),
    ("ح", "H"),
    ("خ", "x"),
    ("د", "d"),  # dal
    ("ذ", "*"),
    ("ر", "r"),
    ("ز", "z"),
    ("س", "s"),
    ("ش", "$"),
    ("ص", "S"),
    ("ض", "D"),
    ("ط", "T"),
    ("ظ", "Z"),
    ("ع", "E"),
    ("غ", "g"),
    ("ف", "f"),
    ("ق", "q"),
    ("ك", "k"),
    ("ل", "l"),
    ("م", "m"),
    ("ن", "n"),
    ("ه", "h"),
    ("و", "w"),
    ("ي", "y"),
    ("ة", "p"),  # teh marbuta

    ("\u064E", "a"),  # fatha
    ("\u064F", "u"),  # damma
    ("\u0650", "i"),  # kasra
    ("\u064B", "F"),  # fathatan
    ("\u064C", "N"),  # dammatan
    ("\u064D", "K"),  # kasratan
    ("\u0651", "~"),  # shadda
    ("\u0652", "o"),  # sukun

    ("ء", "'"),  # lone hamza
    ("أ", ">"),  # hamza on alif
    ("إ", "<"),  # hamza below alif
    ("ؤ", "&"),  # hamza on waw
    ("ئ", "}"),  # hamza on ya

    ("آ", "|"),  # madda on alif
    ("ٱ", "{"),  # alif wasla
    ("\u0670", "`"),  # dagger alif
    ("ى", "Y"),  # alif maqsura

    # Arabic-Indic digits
    ("٠", "0"),
    ("١", "1"),
    ("٢", "2"),
    ("٣", "3"),
    ("٤", "4"),
    ("٥", "5"),
    ("٦", "6"),
    ("٧", "7"),
    ("٨", "8"),
    ("٩", "9"),

    # Punctuation
    ("،", ","),
    ("؛", ";"),
    ("؟", "?"),

    ("پ", "P"),  # peh
    ("چ", "J"),  # tcheh
    ("ڤ", "V"),  # veh
    ("گ", "G"),  # gaf
]

PASSTHROUGH = COMMON_PUNCTUATION

arabic_pre_normalize = replace_all({
    "\uFEAA": "\u062F",  # DAL FINAL FORM -> DAL
    "\u06BE": "\u0647",  # HEH DOACHASHMEE -> HEH
    "\u200F": "",        # RIGHT-TO-LEFT MARK
})

arabic_post_normalize = nfc

# Buckwalter writes shadda before the vowel; Arabic NFC puts it after
buckwalter_post_normalize = regex_rewrite([(r"([aiuoFKN])(~)", r"\2\1")])


def language(verify: bool = True, accept_all_ascii: bool = False, placeholder: str = "?") -> LanguagePair:
    """
    Build the Arabic <-> Buckwalter language pair.

    Args:
        verify: Round-trip check every conversion.
        accept_all_ascii: Let unmapped ASCII through. Breaks the round trip
            for ASCII symbols that Buckwalter maps.
        placeholder: Character emitted for unknown symbols.
    """
    passthrough = PassthroughClassifier(PASSTHROUGH, accept_all_ascii=accept_all_ascii)
    forward = build_engine(
        CHARSET,
        passthrough,
        name="ar2bw",
        placeholder=placeholder,
        pre_normalize=arabic_pre_normalize,
        post_normalize=buckwalter_post_normalize,
    )
    reverse = forward.inverse(
        name="bw2ar",
        post_normalize=arabic_post_normalize,
    )
    return LanguagePair(
        NAME,
        forward,
        reverse,
        verify=verify,
        description="Arabic script <-> Buckwalter ASCII transliteration",
    )


@dataclass(frozen=True)
class CharEntry:
    buckwalter: str
    arabic: str
    description: str


def character_table() -> list[CharEntry]:
    """The character mapping in declaration order, for human readable docs."""
    return [CharEntry(bw, ar, describe(ar)) for ar, bw in CHARSET]
