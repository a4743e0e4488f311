"""
Sample texts for use in tests.
"""

# Tamil lines that convert cleanly and survive the round trip
TAMIL_LINES = [
    "மனநலப்",
    "கேள்வி",
    "ஶ்ரீ",
    "பாசுகளில்",
]

TAMIL_LINES_LATIN = [
    "maṉanalap",
    "kēḷvi",
    "śrī",
    "pācukaḷil",
]

# News headline with grantha letters, punctuation and a dash
TAMIL_HEADLINE = (
    "ஹெச்.ராஜாவை மனநலப் பரிசோதனைக்கு உட்படுத்தக் கோரிய வழக்கு! "
    "- காவல்துறையைக் கேள்வி கேட்ட நீதிமன்றம்"
)

# Vowel sign I directly after vowel sign AA: not valid Tamil
TAMIL_BROKEN = "பாிசுகளில்"
TAMIL_BROKEN_LATIN = "pā?cukaḷil"

# Allah, in bare letters
ARABIC_ALLAH = "الله"
BUCKWALTER_ALLAH = "Allh"

# Hummus with damma before shadda (canonical order)
ARABIC_HUMMUS = "حُمُّص"
# Same word with shadda before damma: converts, but NFC reorders the marks
ARABIC_HUMMUS_SHADDA_FIRST = "حُمُّص"
BUCKWALTER_HUMMUS = "Hum~uS"
