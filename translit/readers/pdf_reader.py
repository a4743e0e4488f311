"""
PDF text reader.

Extracts the text layer of a PDF page by page using PyMuPDF. Scanned PDFs
without a text layer yield no lines; use the image reader for those.
"""

import logging
import os

logger = logging.getLogger(__name__)


class PDFReader:
    """Reads the text lines of PDF files."""

    SUPPORTED_EXTENSIONS = {".pdf"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in PDFReader.SUPPORTED_EXTENSIONS

    @staticmethod
    def read_lines(file_path: str) -> list[str]:
        """Return the non-blank text lines of every page, in page order."""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"PDF file not found: {file_path}")

        try:
            import fitz  # pymupdf
        except ImportError:
            raise RuntimeError("pymupdf is not installed. Run: pip install pymupdf")

        logger.info("[PDF] Reading: %s", file_path)
        lines = []
        doc = fitz.open(file_path)
        try:
            for page in doc:
                text = page.get_text("text")
                lines.extend(line.strip() for line in text.splitlines() if line.strip())
        finally:
            doc.close()
        return lines
