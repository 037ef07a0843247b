"""Tests for writing rendered PDFs to response sinks."""

from __future__ import annotations

import io

import pytest

from rtlpdf.document import RenderedDocument
from rtlpdf.exceptions import DeliveryError
from rtlpdf.response_writer import (
    BufferedSink,
    FastAPIResponseSink,
    StreamSink,
    attachment_response,
    write_attachment,
)

DOC = RenderedDocument(file_name="638460000000000000.pdf", data=b"%PDF-1.7 body")


class CallLog:
    """Sink recording the order of calls."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def set_header(self, name, value):
        self.calls.append(("set_header", name, value))

    def write(self, data):
        self.calls.append(("write", data))

    def end(self):
        self.calls.append(("end",))


class TestWriteAttachment:
    def test_call_sequence(self):
        sink = CallLog()
        write_attachment(DOC, sink)

        assert sink.calls == [
            ("clear",),
            ("set_header", "Content-Type", "application/pdf"),
            ("set_header", "Content-Disposition", "attachment; filename=638460000000000000.pdf"),
            ("write", b"%PDF-1.7 body"),
            ("end",),
        ]

    def test_clears_prior_state(self):
        sink = BufferedSink()
        sink.set_header("X-Stale", "1")
        sink.write(b"stale")

        write_attachment(DOC, sink)

        assert "X-Stale" not in sink.headers
        assert bytes(sink.body) == DOC.data
        assert sink.ended

    def test_ended_sink_raises_delivery_error(self):
        sink = BufferedSink()
        sink.end()
        with pytest.raises(DeliveryError):
            write_attachment(DOC, sink)

    def test_sink_failure_wrapped(self):
        class BrokenSink(CallLog):
            def write(self, data):
                raise BrokenPipeError("client went away")

        with pytest.raises(DeliveryError) as exc_info:
            write_attachment(DOC, BrokenSink())
        assert isinstance(exc_info.value.__cause__, BrokenPipeError)


class TestBufferedSink:
    def test_write_after_end_fails(self):
        sink = BufferedSink()
        sink.end()
        with pytest.raises(DeliveryError):
            sink.write(b"late")

    def test_end_twice_fails(self):
        sink = BufferedSink()
        sink.end()
        with pytest.raises(DeliveryError):
            sink.end()


class TestStreamSink:
    def test_writes_headers_then_body(self):
        stream = io.BytesIO()
        write_attachment(DOC, StreamSink(stream))

        assert stream.getvalue() == (
            b"Content-Type: application/pdf\r\n"
            b"Content-Disposition: attachment; filename=638460000000000000.pdf\r\n"
            b"\r\n"
            b"%PDF-1.7 body"
        )

    def test_nothing_written_before_end(self):
        stream = io.BytesIO()
        sink = StreamSink(stream)
        sink.set_header("Content-Type", "application/pdf")
        sink.write(b"data")
        assert stream.getvalue() == b""

    def test_unencodable_header_leaves_sink_open(self):
        stream = io.BytesIO()
        sink = StreamSink(stream)
        doc = RenderedDocument(file_name="דוח.pdf", data=b"%PDF")

        with pytest.raises(DeliveryError):
            write_attachment(doc, sink)

        assert stream.getvalue() == b""
        assert not sink.ended

    def test_failed_write_leaves_sink_open(self):
        stream = io.BytesIO()
        stream.close()
        sink = StreamSink(stream)

        with pytest.raises(DeliveryError):
            write_attachment(DOC, sink)
        assert not sink.ended


class TestFastAPIResponse:
    def test_attachment_response(self):
        response = attachment_response(DOC)

        assert response.body == DOC.data
        assert response.media_type == "application/pdf"
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == "attachment; filename=638460000000000000.pdf"
        assert response.headers["content-length"] == str(len(DOC.data))

    def test_build_before_end_fails(self):
        with pytest.raises(DeliveryError):
            FastAPIResponseSink().build()
