"""
Input Loader module for the RTL PDF Converter.

Reads HTML or plain-text sources and wraps each one in the right-to-left
container. This module only builds strings; rendering lives in renderer.py.
"""

import logging
from pathlib import Path
from typing import Iterable, Sequence, Union

from .config import RTL_WRAPPER_CLOSE, RTL_WRAPPER_OPEN, SOURCE_ENCODING
from .exceptions import InputUnavailableError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def wrap_html(text: str) -> str:
    """
    Wrap text or an HTML fragment in the RTL container.

    The text is inserted unchanged; nothing is escaped.

    Args:
        text: Plain text or HTML fragment

    Returns:
        The wrapped HTML string
    """
    return f"{RTL_WRAPPER_OPEN}{text}{RTL_WRAPPER_CLOSE}"


def build_html(texts: Iterable[str]) -> str:
    """Wrap each text and concatenate the fragments in order."""
    return "".join(wrap_html(text) for text in texts)


def read_source(path: PathLike) -> str:
    """
    Read a source file as UTF-8 text.

    Undecodable bytes are replaced with U+FFFD instead of failing.

    Args:
        path: Path to the source file

    Returns:
        The file contents

    Raises:
        InputUnavailableError: If the file is missing or unreadable
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=SOURCE_ENCODING, errors="replace") as f:
            return f.read()
    except OSError as e:
        logger.error(f"Cannot read source {path}: {e}")
        raise InputUnavailableError(e.errno, e.strerror or str(e), str(path)) from e


def build_html_from_files(paths: Sequence[PathLike]) -> str:
    """
    Read, wrap and concatenate several source files in input order.

    Stops at the first unreadable file; no partial body is returned.

    Args:
        paths: Source file paths

    Returns:
        The concatenated HTML body

    Raises:
        ValueError: If no paths are given
        InputUnavailableError: If any file is missing or unreadable
    """
    if isinstance(paths, (str, Path)):
        raise TypeError("paths must be a sequence of paths, not a single path")
    if not paths:
        raise ValueError("at least one source path is required")

    fragments = []
    for path in paths:
        fragments.append(wrap_html(read_source(path)))

    logger.info(f"Loaded {len(fragments)} source file(s)")
    return "".join(fragments)
