"""
Russian Cyrillic -> Latin transliteration.

The base table follows the road-sign romanization. With swedish=True the
Latin output is rewritten a second time into the Swedish news agency (TT)
style: digraphs such as zh and kh become zj and ch, and word-final -y gets
a j.

References:
    https://en.wikipedia.org/wiki/Romanization_of_Russian
    https://tt.se/tt-spraket/ord-och-begrepp/internationellt/andra-sprak/ryska/
"""

import re

from ..core import LanguagePair, build_engine
from ..normalize import Hook, nfc, regex_rewrite
from ..passthrough import PassthroughClassifier

NAME = "russian"

ROAD_SIGNS = [
    ("а", "a"),
    ("б", "b"),
    ("в", "v"),
    ("г", "g"),
    ("д", "d"),
    ("е", "e"),
    ("ё", "e"),
    ("ж", "zh"),
    ("з", "z"),
    ("и", "i"),
    ("й", "y"),
    ("к", "k"),
    ("л", "l"),
    ("м", "m"),
    ("н", "n"),
    ("о", "o"),
    ("п", "p"),
    ("р", "r"),
    ("с", "s"),
    ("т", "t"),
    ("у", "u"),
    ("ф", "f"),
    ("х", "kh"),
    ("ц", "ts"),
    ("ч", "ch"),
    ("ш", "sh"),
    ("щ", "shch"),
    ("ъ", "ie"),
    ("ы", "y"),
    ("ь", "’"),
    ("э", "e"),
    ("ю", "yu"),
    ("я", "ya"),
]

PASSTHROUGH = frozenset({
    " ", ",", ".", "?", "!", "–", "-", ":", ";",
    "\u0301",  # combining acute accent (stress mark)
})

SWEDISH_PAIRS = [
    ("zh", "zj"),
    ("kh", "ch"),
    ("ch", "tj"),
    ("sh", "sj"),
    ("yu", "ju"),
    ("ya", "ja"),
    ("ye", "je"),
]

# Word-final -y; must stay unambiguous for the output
SWEDISH_ENDINGS = [
    (r"ky\b", "kij"),
    (r"gy\b", "gij"),
    (r"ay\b", "aj"),
    (r"ey\b", "ej"),
    (r"y\b", "yj"),
]


def swedish_rewrite() -> Hook:
    """Hook turning road-sign Latin into TT style Swedish Latin."""
    digraphs = build_engine(
        SWEDISH_PAIRS,
        PassthroughClassifier.everything(),
        case_variants=True,
        name="rus-lat2swe",
    )
    endings = regex_rewrite(SWEDISH_ENDINGS, flags=re.IGNORECASE)

    def run(s: str) -> str:
        return endings(digraphs.convert(s).output)

    return run


def language(swedish: bool = False, placeholder: str = "?") -> LanguagePair:
    """
    Build the Russian -> Latin language pair.

    Args:
        swedish: Produce Swedish (TT style) output instead of the
            international road-sign romanization.
        placeholder: Character emitted for unknown symbols.
    """
    post = swedish_rewrite() if swedish else None
    forward = build_engine(
        ROAD_SIGNS,
        PassthroughClassifier(PASSTHROUGH),
        case_variants=True,
        name="rus2swe" if swedish else "rus2lat",
        placeholder=placeholder,
        pre_normalize=nfc,
        post_normalize=post,
    )
    return LanguagePair(
        NAME,
        forward,
        description="Russian Cyrillic -> Latin transliteration",
    )
