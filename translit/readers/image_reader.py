"""
Image reader (OCR).

Extracts text lines from scanned pages with Tesseract. The OCR language
should match the source script of the language pair, e.g. "tam" for
Tamil or "ara" for Arabic.
"""

import logging
import os
from typing import Optional

from ..errors import ReaderError

logger = logging.getLogger(__name__)


class ImageReader:
    """Reads text lines from images via OCR."""

    SUPPORTED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".tiff", ".tif", ".bmp", ".gif", ".webp"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in ImageReader.SUPPORTED_EXTENSIONS

    @staticmethod
    def read_lines(file_path: str, lang: Optional[str] = None) -> list[str]:
        """
        OCR an image file and return its non-blank text lines.

        Args:
            file_path: Path to the image.
            lang: Tesseract language code(s), e.g. "tam" or "ara+eng".

        Raises:
            ReaderError: If Tesseract is not available or fails.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"Image file not found: {file_path}")

        try:
            from PIL import Image
        except ImportError:
            raise RuntimeError("Pillow is not installed. Run: pip install Pillow")

        try:
            import pytesseract
        except ImportError:
            raise RuntimeError("pytesseract is not installed. Run: pip install pytesseract")

        logger.info("[IMG] Reading: %s (lang=%s)", file_path, lang or "default")
        with Image.open(file_path) as img:
            try:
                if lang:
                    text = pytesseract.image_to_string(img, lang=lang)
                else:
                    text = pytesseract.image_to_string(img)
            except pytesseract.TesseractError as e:
                raise ReaderError(f"OCR failed for '{file_path}' : {e}") from e
            except pytesseract.TesseractNotFoundError as e:
                raise ReaderError(f"Tesseract is not installed: {e}") from e

        return [line.strip() for line in text.splitlines() if line.strip()]
