#!/usr/bin/env python3
"""
Server for the RTL PDF Converter.

Sync API that converts HTML or text to PDF and returns it as an attachment.

Flow:
1. Client POSTs text, or paths of HTML files under the source directory
2. Sources are wrapped in the RTL container and rendered to PDF
3. The PDF is returned with Content-Disposition: attachment

Usage:
    uvicorn server:app --reload --port 8000
"""

from fastapi import Depends, FastAPI, HTTPException, Response
from pydantic import BaseModel, Field
from typing import List, Optional
from pathlib import Path
import logging

from rtlpdf import (
    DEFAULT_SOURCE_DIR,
    FILE_NAME_PATTERN,
    ConverterError,
    FontNotFoundError,
    InputUnavailableError,
    PdfConverter,
    RenderError,
    attachment_response,
    find_font_file,
    validate_config,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "RTL PDF Converter"
SERVICE_VERSION = "1.0.0"

# =============================================================================
# FASTAPI APP
# =============================================================================

app = FastAPI(
    title=SERVICE_NAME,
    description="Converts HTML or text to right-to-left PDF attachments",
    version=SERVICE_VERSION
)

_converter: Optional[PdfConverter] = None


def get_converter() -> PdfConverter:
    """Return the shared converter, creating it on first use."""
    global _converter
    if _converter is None:
        _converter = PdfConverter()
    return _converter


def get_source_dir() -> Path:
    """Return the directory the files endpoint may read from."""
    return Path(DEFAULT_SOURCE_DIR)


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class HealthResponse(BaseModel):
    status: str
    font_available: bool
    font_path: Optional[str] = None


class TextConversionRequest(BaseModel):
    """Request body for converting a literal string."""
    text: str
    file_name: Optional[str] = Field(None, pattern=FILE_NAME_PATTERN)


class FilesConversionRequest(BaseModel):
    """Request body for converting files from the source directory."""
    paths: List[str] = Field(..., min_length=1)
    file_name: Optional[str] = Field(None, pattern=FILE_NAME_PATTERN)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def resolve_source_path(relative_path: str, source_dir: Path) -> Path:
    """
    Resolve a client-supplied path inside the source directory.

    Raises:
        HTTPException: 400 if the path escapes the source directory
    """
    root = Path(source_dir).resolve()
    candidate = (root / relative_path).resolve()
    if not candidate.is_relative_to(root):
        raise HTTPException(status_code=400, detail=f"Path outside source directory: {relative_path}")
    return candidate


def conversion_error(e: ConverterError) -> HTTPException:
    """Map a conversion error to an HTTP error."""
    if isinstance(e, InputUnavailableError):
        return HTTPException(status_code=404, detail=f"Source unavailable: {e.filename}")
    if isinstance(e, FontNotFoundError):
        return HTTPException(status_code=503, detail="Font file not available")
    if isinstance(e, RenderError):
        return HTTPException(status_code=500, detail="PDF rendering failed")
    return HTTPException(status_code=500, detail=str(e))


# =============================================================================
# STARTUP
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Check configuration on startup."""
    is_valid, errors = validate_config()
    if not is_valid:
        logger.warning("⚠️  Configuration incomplete - conversions will fail:")
        for error in errors:
            logger.warning(f"  - {error}")
    else:
        logger.info(f"Font found: {find_font_file()}")

    logger.info(f"Source directory: {Path(DEFAULT_SOURCE_DIR).resolve()}")


# =============================================================================
# API ENDPOINTS
# =============================================================================

@app.get("/api/v1/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    font_path = find_font_file()
    return HealthResponse(
        status="healthy" if font_path else "degraded",
        font_available=font_path is not None,
        font_path=str(font_path) if font_path else None
    )


@app.post("/api/v1/pdf/text")
def convert_text(
    request: TextConversionRequest,
    converter: PdfConverter = Depends(get_converter)
) -> Response:
    """
    Convert a text or HTML string to a PDF attachment.

    Request body:
    {
        "text": "<p>שלום עולם</p>",
        "file_name": "greeting.pdf"
    }
    """
    logger.info(f"Converting text ({len(request.text):,} characters)")

    try:
        doc = converter.load_text(request.text, request.file_name)
    except ConverterError as e:
        raise conversion_error(e) from e

    return attachment_response(doc)


@app.post("/api/v1/pdf/files")
def convert_files(
    request: FilesConversionRequest,
    converter: PdfConverter = Depends(get_converter),
    source_dir: Path = Depends(get_source_dir)
) -> Response:
    """
    Convert HTML files from the source directory into one PDF attachment.

    Request body:
    {
        "paths": ["intro.html", "chapters/one.html"],
        "file_name": "book.pdf"
    }
    """
    paths = [resolve_source_path(p, source_dir) for p in request.paths]
    logger.info(f"Converting {len(paths)} file(s)")

    try:
        doc = converter.load_files(paths, request.file_name)
    except ConverterError as e:
        raise conversion_error(e) from e

    return attachment_response(doc)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "docs": "/docs",
        "health": "/api/v1/health",
        "usage": {
            "text": {
                "endpoint": "POST /api/v1/pdf/text",
                "body": {"text": "<p>שלום עולם</p>", "file_name": "greeting.pdf (optional)"}
            },
            "files": {
                "endpoint": "POST /api/v1/pdf/files",
                "body": {"paths": ["intro.html", "body.html"], "file_name": "book.pdf (optional)"}
            },
            "response": "application/pdf attachment"
        }
    }


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
