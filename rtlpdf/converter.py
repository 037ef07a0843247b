"""
Converts HTML or plain text to a PDF stream, RTL (Hebrew/Arabic) by default.

Usage:
    converter = PdfConverter()
    doc = converter.load_files(["intro.html", "body.html"])
    doc = converter.load_from_file("report.html")
    doc = converter.load_text("<p>שלום עולם</p>")
    converter.write_attachment(doc, sink)
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from .document import RenderedDocument, default_file_name
from .loader import PathLike, build_html_from_files, read_source, wrap_html
from .renderer import PdfRenderer, WeasyPrintRenderer
from .response_writer import ResponseSink, write_attachment

logger = logging.getLogger(__name__)


class PdfConverter:
    """
    Load sources, render them to PDF and deliver the result.

    The converter holds no per-call state; one instance can serve any
    number of conversions.
    """

    def __init__(
        self,
        renderer: Optional[PdfRenderer] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.renderer = renderer if renderer is not None else WeasyPrintRenderer()
        self.clock = clock

    def load_from_file(self, path: PathLike, file_name: Optional[str] = None) -> RenderedDocument:
        """Read one HTML file, wrap it and render it."""
        return self.render(wrap_html(read_source(path)), file_name)

    def load_files(self, paths: Sequence[PathLike], file_name: Optional[str] = None) -> RenderedDocument:
        """Read several HTML files and render them as one document, in order."""
        return self.render(build_html_from_files(paths), file_name)

    def load_text(self, text: str, file_name: Optional[str] = None) -> RenderedDocument:
        """Wrap a text or HTML string and render it."""
        return self.render(wrap_html(text), file_name)

    def render(self, html: str, file_name: Optional[str] = None) -> RenderedDocument:
        """
        Render an assembled HTML string.

        Args:
            html: The HTML to render, already wrapped
            file_name: Attachment name; defaults to "<ticks>.pdf" from the clock

        Returns:
            The rendered document
        """
        if not file_name:
            file_name = default_file_name(self.clock())

        logger.info(f"Rendering {file_name} ({len(html):,} characters of HTML)")
        data = self.renderer.render_pdf(html)
        return RenderedDocument(file_name=file_name, data=data)

    @staticmethod
    def write_attachment(doc: RenderedDocument, sink: ResponseSink) -> None:
        """Write a rendered document to a response sink as an attachment."""
        write_attachment(doc, sink)
