"""Shared fixtures for rtlpdf tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import fitz
import pytest

from rtlpdf import PdfConverter

FIXED_NOW = datetime(2024, 3, 14, 15, 9, 26, 535897)

# Unicode TrueType fonts with Hebrew coverage found on common systems
CANDIDATE_FONTS = [
    "/usr/share/fonts/truetype/msttcorefonts/Arial.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
    "/Library/Fonts/Arial.ttf",
    "C:/Windows/Fonts/ARIAL.TTF",
]


def make_pdf(pages: int = 1) -> bytes:
    """Build a real, blank US-Letter PDF."""
    doc = fitz.open()
    for _ in range(pages):
        doc.new_page(width=612, height=792)
    data = doc.tobytes()
    doc.close()
    return data


class RecordingRenderer:
    """PdfRenderer that records the HTML it receives."""

    def __init__(self, data: bytes | None = None) -> None:
        self.data = data if data is not None else make_pdf()
        self.calls: list[str] = []

    def render_pdf(self, html: str) -> bytes:
        self.calls.append(html)
        return self.data


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def converter(renderer: RecordingRenderer) -> PdfConverter:
    return PdfConverter(renderer=renderer, clock=lambda: FIXED_NOW)


@pytest.fixture
def write_source(tmp_path: Path):
    """Write a UTF-8 source file under tmp_path and return its path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def system_font() -> Path:
    for candidate in CANDIDATE_FONTS:
        path = Path(candidate)
        if path.is_file():
            return path
    pytest.skip("no TrueType font with Hebrew coverage installed")


@pytest.fixture
def weasyprint_available() -> None:
    try:
        import weasyprint  # noqa: F401
    except (ImportError, OSError) as e:
        pytest.skip(f"weasyprint unavailable: {e}")
