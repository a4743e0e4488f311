"""
Input readers: turn files and URLs into lines of text to transliterate.
"""

import os
from typing import Optional

from ..errors import ReaderError
from .image_reader import ImageReader
from .office_reader import OfficeReader
from .pdf_reader import PDFReader
from .text_reader import TextReader
from .web_reader import WebReader


def is_source(source: str) -> bool:
    """True if source names something a reader can open (file or URL)."""
    return WebReader.can_handle(source) or os.path.isfile(source)


def read_source(source: str, ocr_lang: Optional[str] = None) -> list[str]:
    """
    Read the text lines of a file or URL.

    Args:
        source: File path or http(s) URL.
        ocr_lang: Tesseract language for image files.

    Returns:
        The lines of text, without line terminators.

    Raises:
        ReaderError: If no reader can handle the source.
    """
    if WebReader.can_handle(source):
        return WebReader.read_lines(source)

    if not os.path.isfile(source):
        raise ReaderError(
            f"Cannot handle source: {source}\n"
            f"Provide a valid file path or URL."
        )

    if PDFReader.can_handle(source):
        return PDFReader.read_lines(source)
    elif ImageReader.can_handle(source):
        return ImageReader.read_lines(source, lang=ocr_lang)
    elif OfficeReader.can_handle(source):
        return OfficeReader.read_lines(source)
    else:
        return TextReader.read_lines(source)


def supported_formats() -> dict:
    """Return a dictionary of all supported input formats."""
    return {
        "Plain Text": sorted(TextReader.SUPPORTED_EXTENSIONS) + ["(any UTF-8 file)"],
        "PDF": sorted(PDFReader.SUPPORTED_EXTENSIONS),
        "Images (OCR)": sorted(ImageReader.SUPPORTED_EXTENSIONS),
        "Office Documents": sorted(OfficeReader.SUPPORTED_EXTENSIONS),
        "Web Pages": ["http://", "https://"],
    }


__all__ = [
    "ImageReader",
    "OfficeReader",
    "PDFReader",
    "TextReader",
    "WebReader",
    "is_source",
    "read_source",
    "supported_formats",
]
