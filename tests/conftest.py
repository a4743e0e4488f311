"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from translit.core import LanguagePair, build_engine
from translit.languages import get_language
from tests.fixtures import TAMIL_LINES


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "network: mark as requiring network access")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def toy_engine():
    """A small engine with overlapping multi-code-point sources."""
    return build_engine(
        [("a", "1"), ("ab", "2"), ("abc", "3"), ("b", "4")],
        passthrough=" .",
        name="toy",
    )


@pytest.fixture
def lossy_engine():
    """An engine mapping two sources onto the same target."""
    return build_engine({"a": "x", "b": "x", "c": "y"}, passthrough=" ", name="lossy")


@pytest.fixture
def lossy_pair(lossy_engine):
    """A verified pair whose reverse direction cannot restore 'b'."""
    return LanguagePair("lossy", lossy_engine, lossy_engine.inverse(), verify=True)


# ============================================================================
# Language Fixtures
# ============================================================================


@pytest.fixture
def tamil():
    """Tamil <-> Latin pair with round-trip verification."""
    return get_language("tamil")


@pytest.fixture
def tamil_ascii():
    """Tamil pair that lets unmapped ASCII through."""
    return get_language("tamil", accept_all_ascii=True)


@pytest.fixture
def buckwalter():
    """Arabic <-> Buckwalter pair with round-trip verification."""
    return get_language("buckwalter")


@pytest.fixture
def russian():
    return get_language("russian")


@pytest.fixture
def russian_swedish():
    return get_language("russian", swedish=True)


@pytest.fixture
def greek():
    return get_language("greek")


@pytest.fixture
def persian():
    return get_language("persian")


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def tamil_file(tmp_path):
    """A UTF-8 text file with Tamil lines."""
    path = tmp_path / "tamil.txt"
    path.write_text("\n".join(TAMIL_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TRANSLIT_* settings from the calling shell out of the tests."""
    for name in ("PLACEHOLDER", "VERIFY", "ACCEPT_ASCII", "WORKERS", "OCR_LANG", "LOG_LEVEL"):
        monkeypatch.delenv("TRANSLIT_" + name, raising=False)
