"""
Plain text reader.

Reads UTF-8 text files line by line, decompressing gzip files on the fly
when the file name ends in .gz.
"""

import gzip
import logging
import os

from ..errors import ReaderError

logger = logging.getLogger(__name__)


class TextReader:
    """Reads plain text and gzip-compressed text files."""

    SUPPORTED_EXTENSIONS = {".txt", ".gz", ".csv", ".tsv", ".md"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        return os.path.isfile(file_path)

    @staticmethod
    def read_lines(file_path: str) -> list[str]:
        """
        Read all lines of a text file, without line terminators.

        Raises:
            FileNotFoundError: If the file does not exist.
            ReaderError: If the file is not valid UTF-8 or not valid gzip.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        logger.info("[TXT] Reading: %s", file_path)
        try:
            if file_path.endswith(".gz"):
                with gzip.open(file_path, "rt", encoding="utf-8") as f:
                    return f.read().splitlines()
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read().splitlines()
        except (UnicodeDecodeError, gzip.BadGzipFile, EOFError) as e:
            raise ReaderError(f"failed to read '{file_path}' : {e}") from e
