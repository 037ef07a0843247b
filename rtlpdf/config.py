"""
Configuration module for the RTL PDF Converter.

Loads environment variables and defines all constants used across the application.
The CLI, the server and the library modules all import settings from here.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# HTML WRAPPING
# =============================================================================

# Every source is wrapped in this container before rendering
RTL_WRAPPER_OPEN = '<div dir="rtl" style="font-family: arial;">'
RTL_WRAPPER_CLOSE = '</div>'

# Source files are decoded as UTF-8; a leading BOM is dropped
SOURCE_ENCODING = "utf-8-sig"

# =============================================================================
# PAGE CONFIGURATION
# =============================================================================

PAGE_SIZE = "Letter"
PAGE_MARGIN_PT = 50  # All four sides
PAGE_DIRECTION = "rtl"
INPUT_ENCODING = "utf-8"
BASE_FONT_SIZE_PT = 12

# =============================================================================
# FONT CONFIGURATION
# =============================================================================

FONT_FAMILY = "arial"
FONT_FILE_NAME = os.getenv("RTL_PDF_FONT_FILE", "ARIAL.TTF")
FONT_PATH = os.getenv("RTL_PDF_FONT_PATH", "")


def get_system_fonts_dir() -> Path:
    """
    Return the platform-standard fonts directory.

    Returns:
        Path of the system fonts directory (may not exist)
    """
    if sys.platform.startswith("win"):
        windir = os.environ.get("WINDIR", r"C:\Windows")
        return Path(windir) / "Fonts"
    if sys.platform == "darwin":
        return Path("/Library/Fonts")
    return Path("/usr/share/fonts/truetype/msttcorefonts")


FONTS_DIR = Path(os.getenv("RTL_PDF_FONTS_DIR") or get_system_fonts_dir())

# =============================================================================
# RESPONSE CONFIGURATION
# =============================================================================

PDF_CONTENT_TYPE = "application/pdf"
PDF_SUFFIX = ".pdf"

# Attachment names go straight into a header, so they stay ASCII
FILE_NAME_PATTERN = r"^[A-Za-z0-9._-]+$"

# =============================================================================
# DEFAULT PATHS (can be overridden via environment variables)
# =============================================================================

DEFAULT_SOURCE_DIR = Path(os.getenv("RTL_PDF_SOURCE_DIR", "./sources"))
DEFAULT_OUTPUT_DIR = Path(os.getenv("RTL_PDF_OUTPUT_DIR", "./output"))


def find_font_file(
    fonts_dir: Path = FONTS_DIR,
    file_name: str = FONT_FILE_NAME,
    font_path: Optional[str] = FONT_PATH,
) -> Optional[Path]:
    """
    Look up the Unicode font file.

    An explicit font path wins over the directory lookup. Inside the fonts
    directory the file name is matched case-insensitively, since Windows
    ships "ARIAL.TTF" while most Linux packages install "arial.ttf".

    Args:
        fonts_dir: Directory to search
        file_name: Font file name to look for
        font_path: Explicit font file path, or empty to search fonts_dir

    Returns:
        Path to the font file, or None if it is not present
    """
    if font_path:
        candidate = Path(font_path)
        return candidate if candidate.is_file() else None

    exact = Path(fonts_dir) / file_name
    if exact.is_file():
        return exact

    if not Path(fonts_dir).is_dir():
        return None

    wanted = file_name.lower()
    for entry in sorted(Path(fonts_dir).iterdir()):
        if entry.name.lower() == wanted and entry.is_file():
            return entry

    return None


def validate_config() -> tuple[bool, list[str]]:
    """
    Validate that required configuration is present.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if find_font_file() is None:
        if FONT_PATH:
            errors.append(f"Font file not found at RTL_PDF_FONT_PATH={FONT_PATH}")
        else:
            errors.append(f"Font file {FONT_FILE_NAME} not found in {FONTS_DIR}")

    return len(errors) == 0, errors
