"""
Web page reader.

Fetches an HTML page and returns its visible text lines, with scripts,
styles and navigation stripped.
"""

import logging
from urllib.parse import urlparse

from ..errors import ReaderError

logger = logging.getLogger(__name__)

REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
}


class WebReader:
    """Reads the text of web pages."""

    TIMEOUT = 30

    @staticmethod
    def can_handle(source: str) -> bool:
        """Check if the source looks like a URL."""
        try:
            parsed = urlparse(source)
        except ValueError:
            return False
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)

    @staticmethod
    def read_lines(url: str) -> list[str]:
        """
        Fetch url and return the non-blank lines of its visible text.

        Raises:
            ReaderError: If the request fails or the page is not HTML/text.
        """
        try:
            import requests
        except ImportError:
            raise RuntimeError("requests is not installed. Run: pip install requests")

        try:
            from bs4 import BeautifulSoup
        except ImportError:
            raise RuntimeError("beautifulsoup4 is not installed. Run: pip install beautifulsoup4")

        logger.info("[URL] Reading: %s", url)
        try:
            response = requests.get(url, headers=REQUEST_HEADERS, timeout=WebReader.TIMEOUT, allow_redirects=True)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ReaderError(f"failed to fetch '{url}' : {e}") from e

        content_type = response.headers.get("Content-Type", "")
        if "text/plain" in content_type:
            text = response.text
        elif "html" in content_type or not content_type:
            soup = BeautifulSoup(response.text, "html.parser")
            for tag in soup.find_all(["script", "style", "nav", "footer", "iframe", "noscript"]):
                tag.decompose()
            text = soup.get_text("\n")
        else:
            raise ReaderError(f"unsupported content type for '{url}': {content_type}")

        return [line.strip() for line in text.splitlines() if line.strip()]
