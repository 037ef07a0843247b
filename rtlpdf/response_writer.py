"""
Response Writer module for the RTL PDF Converter.

Writes a rendered PDF to a response as a downloadable attachment.
Sinks adapt the same sequence of calls to a FastAPI response or to a
plain binary stream.
"""

import logging
from typing import BinaryIO, Optional, Protocol

from fastapi import Response

from .config import PDF_CONTENT_TYPE
from .document import RenderedDocument
from .exceptions import DeliveryError

logger = logging.getLogger(__name__)


class ResponseSink(Protocol):
    def clear(self) -> None:
        ...

    def set_header(self, name: str, value: str) -> None:
        ...

    def write(self, data: bytes) -> None:
        ...

    def end(self) -> None:
        ...


def content_disposition(file_name: str) -> str:
    return f"attachment; filename={file_name}"


def write_attachment(doc: RenderedDocument, sink: ResponseSink) -> None:
    """
    Write a rendered document to a sink as a PDF attachment.

    Any prior state on the sink is cleared first, and the sink is ended
    after the body is written.

    Args:
        doc: The rendered document
        sink: Response sink to write to

    Raises:
        DeliveryError: If the sink fails at any step
    """
    try:
        sink.clear()
        sink.set_header("Content-Type", PDF_CONTENT_TYPE)
        sink.set_header("Content-Disposition", content_disposition(doc.file_name))
        sink.write(doc.data)
        sink.end()
    except DeliveryError:
        raise
    except Exception as e:
        logger.error(f"Failed to deliver {doc.file_name}: {e}")
        raise DeliveryError(f"Failed to deliver {doc.file_name}: {e}") from e

    logger.info(f"Delivered {doc.file_name} ({doc.size:,} bytes)")


class BufferedSink:
    """Collects headers and body until the response is ended."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.body = bytearray()
        self.ended = False

    def _check_open(self) -> None:
        if self.ended:
            raise DeliveryError("response already ended")

    def clear(self) -> None:
        self._check_open()
        self.headers.clear()
        self.body.clear()

    def set_header(self, name: str, value: str) -> None:
        self._check_open()
        self.headers[name] = value

    def write(self, data: bytes) -> None:
        self._check_open()
        self.body.extend(data)

    def end(self) -> None:
        self._check_open()
        self.ended = True


class StreamSink(BufferedSink):
    """
    Sink for non-HTTP hosting.

    On end() it writes CGI-style header lines, a blank line and then the
    body to a binary stream.
    """

    def __init__(self, stream: BinaryIO) -> None:
        super().__init__()
        self._stream = stream

    def end(self) -> None:
        self._check_open()
        head = "".join(f"{name}: {value}\r\n" for name, value in self.headers.items())
        payload = head.encode("latin-1") + b"\r\n" + bytes(self.body)
        self._stream.write(payload)
        self._stream.flush()
        # Only a fully written response counts as ended
        super().end()


class FastAPIResponseSink(BufferedSink):
    """Sink that produces a fastapi.Response once ended."""

    def build(self) -> Response:
        if not self.ended:
            raise DeliveryError("response has not been ended")

        headers = dict(self.headers)
        media_type: Optional[str] = headers.pop("Content-Type", None)
        return Response(content=bytes(self.body), media_type=media_type, headers=headers)


def attachment_response(doc: RenderedDocument) -> Response:
    """Build a FastAPI attachment response for a rendered document."""
    sink = FastAPIResponseSink()
    write_attachment(doc, sink)
    return sink.build()
