#!/usr/bin/env python3
"""
CLI Runner for the RTL PDF Converter.

Handles all file system operations around the converter:
- Reading HTML files from disk
- Calling rtlpdf for wrapping and rendering
- Saving PDFs to disk, or writing an attachment response to stdout

Usage:
    python cli_runner.py [files ...] [--text TEXT] [--name NAME] [--output-dir DIR] [--cgi]

Examples:
    python cli_runner.py page.html                     # One file
    python cli_runner.py intro.html body.html          # Files combined in order
    python cli_runner.py --text "<p>שלום עולם</p>"     # Literal text
    python cli_runner.py page.html --cgi > response    # Headers + PDF on stdout
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Optional

from rtlpdf import (
    DEFAULT_OUTPUT_DIR,
    FILE_NAME_PATTERN,
    ConverterError,
    PdfConverter,
    RenderedDocument,
    StreamSink,
    get_pdf_page_count,
    validate_config,
)

# Configure logging (stderr, so --cgi output on stdout stays clean)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    stream=sys.stderr
)
logger = logging.getLogger(__name__)


# =============================================================================
# FILE SYSTEM OPERATIONS (CLI-SPECIFIC)
# =============================================================================

def save_pdf_report(pdf_bytes: bytes, output_path: Path) -> bool:
    """
    Save PDF to disk.

    Args:
        pdf_bytes: The PDF content as bytes
        output_path: Path where to save the file

    Returns:
        True if successful, False otherwise
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'wb') as f:
            f.write(pdf_bytes)
        return True
    except OSError as e:
        logger.error(f"Error saving PDF to {output_path}: {e}")
        return False


# =============================================================================
# ARGUMENTS
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert HTML or text to a right-to-left PDF."
    )
    parser.add_argument("files", nargs="*", type=Path, help="HTML files, combined in order")
    parser.add_argument("--text", help="Convert this text instead of files")
    parser.add_argument("--name", help="Output file name (default: <ticks>.pdf)")
    parser.add_argument(
        "--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR,
        help=f"Where to save the PDF (default: {DEFAULT_OUTPUT_DIR})"
    )
    parser.add_argument(
        "--cgi", action="store_true",
        help="Write headers and PDF to stdout instead of saving"
    )
    return parser


# =============================================================================
# CONVERSION (ORCHESTRATION)
# =============================================================================

def convert(args: argparse.Namespace, converter: PdfConverter) -> RenderedDocument:
    """Run the conversion the arguments ask for."""
    if args.text is not None:
        logger.info(f"Converting text ({len(args.text):,} characters)")
        return converter.load_text(args.text, args.name)

    if len(args.files) == 1:
        logger.info(f"Converting file: {args.files[0]}")
        return converter.load_from_file(args.files[0], args.name)

    logger.info(f"Converting {len(args.files)} files")
    return converter.load_files(args.files, args.name)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[list[str]] = None, converter: Optional[PdfConverter] = None) -> int:
    """Main entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.text is None and not args.files:
        parser.error("give one or more files, or --text")
    if args.text is not None and args.files:
        parser.error("--text cannot be combined with files")
    if args.name is not None and not re.fullmatch(FILE_NAME_PATTERN, args.name):
        parser.error(f"--name must match {FILE_NAME_PATTERN}")

    is_valid, errors = validate_config()
    if not is_valid:
        for error in errors:
            logger.warning(error)

    converter = converter or PdfConverter()

    try:
        doc = convert(args, converter)
    except ConverterError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    if args.cgi:
        try:
            converter.write_attachment(doc, StreamSink(sys.stdout.buffer))
        except ConverterError as e:
            logger.error(f"Writing response failed: {e}")
            return 1
        return 0

    output_path = args.output_dir / doc.file_name
    if not save_pdf_report(doc.data, output_path):
        return 1

    logger.info(f"PDF saved to: {output_path} ({get_pdf_page_count(doc.data)} page(s))")
    return 0


if __name__ == "__main__":
    sys.exit(main())
