"""
translit - Rule-based transliteration between scripts

Converts text from one writing system to another with fixed symbol tables
and greedy longest-match segmentation. Unknown symbols never abort a
conversion: they are replaced by a placeholder and reported. Reversible
language pairs can verify each conversion by mapping the output back.
"""

__version__ = "1.0.0"

from .core import Engine, LanguagePair, build_engine, convert_with_verification
from .errors import ConfigurationError, ReaderError, TranslitError
from .index import MatchIndex
from .languages import available_languages, get_language
from .passthrough import PassthroughClassifier
from .result import ConversionResult, Diagnostic, DiagnosticKind
from .symbols import SymbolTable
from .validator import RoundTripValidator

__all__ = [
    "ConfigurationError",
    "ConversionResult",
    "Diagnostic",
    "DiagnosticKind",
    "Engine",
    "LanguagePair",
    "MatchIndex",
    "PassthroughClassifier",
    "ReaderError",
    "RoundTripValidator",
    "SymbolTable",
    "TranslitError",
    "available_languages",
    "build_engine",
    "convert_with_verification",
    "get_language",
]
