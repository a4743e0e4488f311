"""
Exception types shared across the translit package.
"""


class TranslitError(Exception):
    """Base class for translit errors."""
    pass


class ConfigurationError(TranslitError):
    """Raised when a symbol table or engine is configured incorrectly."""
    pass


class ReaderError(TranslitError):
    """Raised when text cannot be extracted from an input source."""
    pass
