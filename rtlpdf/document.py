"""Rendered document value and default file naming."""

from dataclasses import dataclass
from datetime import datetime

from .config import PDF_SUFFIX

# .NET DateTime ticks: 100-nanosecond intervals since 0001-01-01 00:00:00
_TICKS_EPOCH = datetime(1, 1, 1)
_TICKS_PER_SECOND = 10_000_000
_TICKS_PER_MICROSECOND = 10


@dataclass(frozen=True)
class RenderedDocument:
    """A finished PDF and the file name it should be delivered under."""

    file_name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def to_ticks(moment: datetime) -> int:
    """Convert a naive datetime to a tick count."""
    delta = moment.replace(tzinfo=None) - _TICKS_EPOCH
    return (
        (delta.days * 86_400 + delta.seconds) * _TICKS_PER_SECOND
        + delta.microseconds * _TICKS_PER_MICROSECOND
    )


def default_file_name(moment: datetime) -> str:
    """
    Build the default attachment name for a document rendered at `moment`.

    Args:
        moment: The time of rendering

    Returns:
        File name of the form "<ticks>.pdf"
    """
    return f"{to_ticks(moment)}{PDF_SUFFIX}"
