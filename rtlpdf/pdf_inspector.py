"""
PDF Inspector module for the RTL PDF Converter.

Reads back rendered PDFs with PyMuPDF (fitz) for reporting.
This module is stateless - all functions accept bytes and return data.
"""

import logging

import fitz  # PyMuPDF

logger = logging.getLogger(__name__)


def get_pdf_page_count(pdf_bytes: bytes) -> int:
    """
    Get the total page count of a PDF from bytes.

    Args:
        pdf_bytes: PDF file content as bytes

    Returns:
        Number of pages in the PDF, or 0 if error
    """
    try:
        with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
            return doc.page_count
    except Exception as e:
        logger.error(f"Error getting page count: {e}")
        return 0


def get_page_sizes(pdf_bytes: bytes) -> list[tuple[float, float]]:
    """
    Get the (width, height) of every page in points.

    Args:
        pdf_bytes: PDF file content as bytes

    Returns:
        One (width, height) tuple per page
    """
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        return [(page.rect.width, page.rect.height) for page in doc]


def extract_text(pdf_bytes: bytes) -> str:
    """Extract the text of all pages, separated by newlines."""
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        return "\n".join(page.get_text() for page in doc)
