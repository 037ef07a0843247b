"""
Render Adapter module for the RTL PDF Converter.

Converts an HTML string to PDF bytes using weasyprint.
Handles RTL Hebrew/Arabic text through a Unicode TrueType font and
a right-to-left root direction.
"""

import errno
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from .config import (
    BASE_FONT_SIZE_PT,
    FONT_FAMILY,
    FONT_FILE_NAME,
    FONT_PATH,
    FONTS_DIR,
    INPUT_ENCODING,
    PAGE_DIRECTION,
    PAGE_MARGIN_PT,
    PAGE_SIZE,
    find_font_file,
)
from .exceptions import FontNotFoundError, RenderError

logger = logging.getLogger(__name__)


class PdfRenderer(Protocol):
    def render_pdf(self, html: str) -> bytes:
        """Render an HTML string to PDF bytes.
        This is a blocking call.
        """


@dataclass(frozen=True)
class RenderSettings:
    page_size: str = PAGE_SIZE
    margin_pt: float = PAGE_MARGIN_PT
    direction: str = PAGE_DIRECTION
    encoding: str = INPUT_ENCODING
    font_family: str = FONT_FAMILY
    font_size_pt: float = BASE_FONT_SIZE_PT
    # None means look the font up in the system fonts directory
    font_path: Optional[Path] = None


def resolve_font_path(settings: RenderSettings) -> Path:
    """
    Find the font file the settings ask for.

    Args:
        settings: Render settings

    Returns:
        Path to an existing font file

    Raises:
        FontNotFoundError: If the font file does not exist
    """
    if settings.font_path is not None:
        font_path = Path(settings.font_path)
        if font_path.is_file():
            return font_path
        logger.error(f"Font file not found: {font_path}")
        raise FontNotFoundError(errno.ENOENT, "Font file not found", str(font_path))

    font_path = find_font_file()
    if font_path is None:
        # RTL_PDF_FONT_PATH replaces the directory lookup when set
        checked = Path(FONT_PATH) if FONT_PATH else Path(FONTS_DIR) / FONT_FILE_NAME
        logger.error(f"Font file not found: {checked}")
        raise FontNotFoundError(errno.ENOENT, "Font file not found", str(checked))
    return font_path


def build_page_css(settings: RenderSettings, font_path: Path) -> str:
    """
    Build the stylesheet carrying the fixed page settings.

    Args:
        settings: Render settings
        font_path: Resolved font file bound to the settings' font family

    Returns:
        CSS string
    """
    return f"""
        @font-face {{
            font-family: "{settings.font_family}";
            src: url("{Path(font_path).resolve().as_uri()}");
        }}

        @page {{
            size: {settings.page_size};
            margin: {settings.margin_pt}pt;
        }}

        html {{
            direction: {settings.direction};
        }}

        body {{
            font-family: "{settings.font_family}";
            font-size: {settings.font_size_pt}pt;
        }}
    """


class WeasyPrintRenderer:
    """PdfRenderer backed by weasyprint."""

    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self.settings = settings or RenderSettings()

    def render_pdf(self, html: str) -> bytes:
        """
        Convert an HTML string to PDF bytes.

        Args:
            html: HTML document or fragment

        Returns:
            PDF as bytes

        Raises:
            FontNotFoundError: If the font file is missing
            RenderError: If weasyprint fails for any reason
        """
        font_path = resolve_font_path(self.settings)

        try:
            from weasyprint import CSS, HTML
            from weasyprint.text.fonts import FontConfiguration

            font_config = FontConfiguration()
            page_css = CSS(
                string=build_page_css(self.settings, font_path),
                font_config=font_config,
            )

            encoding = self.settings.encoding
            html_doc = HTML(string=html.encode(encoding), encoding=encoding)

            pdf_bytes = html_doc.write_pdf(stylesheets=[page_css], font_config=font_config)

        except Exception as e:
            logger.error(f"PDF conversion failed: {e}")
            raise RenderError(f"PDF conversion failed: {e}") from e

        logger.info(f"PDF generated successfully ({len(pdf_bytes):,} bytes)")
        return pdf_bytes
