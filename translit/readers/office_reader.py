"""
Office document reader.

Pulls the text out of Word (.docx) and Excel (.xlsx) files: one line per
non-empty paragraph, table cell or spreadsheet cell, in document order.
"""

import logging
import os

logger = logging.getLogger(__name__)


class OfficeReader:
    """Reads text lines from Office documents (.docx, .xlsx)."""

    SUPPORTED_EXTENSIONS = {".docx", ".xlsx"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in OfficeReader.SUPPORTED_EXTENSIONS

    @staticmethod
    def read_lines(file_path: str) -> list[str]:
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        _, ext = os.path.splitext(file_path.lower())

        if ext == ".docx":
            return _read_docx(file_path)
        elif ext == ".xlsx":
            return _read_xlsx(file_path)
        else:
            raise ValueError(f"Unsupported Office format: {ext}")


def _read_docx(file_path: str) -> list[str]:
    """Paragraphs and table cells of a Word document, in body order."""
    try:
        from docx import Document
    except ImportError:
        raise RuntimeError("python-docx is not installed. Run: pip install python-docx")

    logger.info("[DOCX] Reading: %s", file_path)
    doc = Document(file_path)
    paragraphs = {p._element: p for p in doc.paragraphs}
    tables = {t._element: t for t in doc.tables}
    lines = []

    for element in doc.element.body:
        if element in paragraphs:
            text = paragraphs[element].text.strip()
            if text:
                lines.append(text)
        elif element in tables:
            for row in tables[element].rows:
                for cell in row.cells:
                    text = cell.text.strip().replace("\n", " ")
                    if text:
                        lines.append(text)

    return lines


def _read_xlsx(file_path: str) -> list[str]:
    """String cells of every sheet, row by row."""
    try:
        from openpyxl import load_workbook
    except ImportError:
        raise RuntimeError("openpyxl is not installed. Run: pip install openpyxl")

    logger.info("[XLSX] Reading: %s", file_path)
    wb = load_workbook(file_path, read_only=True, data_only=True)
    lines = []
    try:
        for sheet_name in wb.sheetnames:
            ws = wb[sheet_name]
            for row in ws.iter_rows(values_only=True):
                for cell in row:
                    if cell is None:
                        continue
                    text = str(cell).strip()
                    if text:
                        lines.append(text)
    finally:
        wb.close()
    return lines
