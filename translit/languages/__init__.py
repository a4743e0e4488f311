"""
Per-language mapping tables.

Each module exposes a language(**options) factory returning a LanguagePair.
Factories build fresh engines; build a pair once per process and share it.
"""

import inspect

from ..errors import ConfigurationError
from . import buckwalter, greek, persian, russian, tamil

LANGUAGES = {
    buckwalter.NAME: buckwalter.language,
    tamil.NAME: tamil.language,
    persian.NAME: persian.language,
    russian.NAME: russian.language,
    greek.NAME: greek.language,
}


def available_languages() -> list[str]:
    return sorted(LANGUAGES)


def get_language(name: str, **options):
    """
    Build the LanguagePair registered under name.

    Args:
        name: Registered language name (see available_languages()).
        **options: Factory options, e.g. verify=False or swedish=True.

    Raises:
        ConfigurationError: If name is unknown or an option is not supported.
    """
    try:
        factory = LANGUAGES[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown language: {name}. Available: {', '.join(available_languages())}"
        ) from None
    try:
        inspect.signature(factory).bind(**options)
    except TypeError as e:
        raise ConfigurationError(f"Invalid options for {name}: {e}") from e
    return factory(**options)


__all__ = ["LANGUAGES", "available_languages", "get_language"]
