"""
RTL PDF Converter.

Converts HTML or plain text to PDF, right-to-left (Hebrew/Arabic) by default,
and writes the result to an HTTP response as an attachment.

Modules:
- config: Settings and constants
- loader: Reading sources and wrapping them in the RTL container
- renderer: HTML to PDF rendering through weasyprint
- document: The rendered document value and default file naming
- response_writer: Writing a rendered PDF to a response sink
- converter: The PdfConverter facade tying the above together
- pdf_inspector: PyMuPDF helpers for reading rendered PDFs back
"""

from .config import (
    RTL_WRAPPER_OPEN,
    RTL_WRAPPER_CLOSE,
    PAGE_SIZE,
    PAGE_MARGIN_PT,
    FONT_FAMILY,
    FONT_FILE_NAME,
    FONTS_DIR,
    PDF_CONTENT_TYPE,
    FILE_NAME_PATTERN,
    DEFAULT_SOURCE_DIR,
    DEFAULT_OUTPUT_DIR,
    find_font_file,
    validate_config,
)

from .exceptions import (
    ConverterError,
    InputUnavailableError,
    FontNotFoundError,
    RenderError,
    DeliveryError,
)

from .document import (
    RenderedDocument,
    default_file_name,
)

from .loader import (
    wrap_html,
    build_html,
    read_source,
    build_html_from_files,
)

from .renderer import (
    PdfRenderer,
    RenderSettings,
    WeasyPrintRenderer,
    resolve_font_path,
)

from .response_writer import (
    ResponseSink,
    StreamSink,
    FastAPIResponseSink,
    write_attachment,
    attachment_response,
)

from .converter import (
    PdfConverter,
)

from .pdf_inspector import (
    get_pdf_page_count,
    get_page_sizes,
    extract_text,
)

__all__ = [
    # Config
    'RTL_WRAPPER_OPEN',
    'RTL_WRAPPER_CLOSE',
    'PAGE_SIZE',
    'PAGE_MARGIN_PT',
    'FONT_FAMILY',
    'FONT_FILE_NAME',
    'FONTS_DIR',
    'PDF_CONTENT_TYPE',
    'FILE_NAME_PATTERN',
    'DEFAULT_SOURCE_DIR',
    'DEFAULT_OUTPUT_DIR',
    'find_font_file',
    'validate_config',
    # Errors
    'ConverterError',
    'InputUnavailableError',
    'FontNotFoundError',
    'RenderError',
    'DeliveryError',
    # Document
    'RenderedDocument',
    'default_file_name',
    # Loader
    'wrap_html',
    'build_html',
    'read_source',
    'build_html_from_files',
    # Renderer
    'PdfRenderer',
    'RenderSettings',
    'WeasyPrintRenderer',
    'resolve_font_path',
    # Response Writer
    'ResponseSink',
    'StreamSink',
    'FastAPIResponseSink',
    'write_attachment',
    'attachment_response',
    # Converter
    'PdfConverter',
    # PDF Inspector
    'get_pdf_page_count',
    'get_page_sizes',
    'extract_text',
]
