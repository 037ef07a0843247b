"""Tests for the rendered document value and default naming."""

from __future__ import annotations

import dataclasses
import re
from datetime import datetime, timedelta, timezone

import pytest

from rtlpdf.document import RenderedDocument, default_file_name, to_ticks


class TestTicks:
    def test_epoch_is_zero(self):
        assert to_ticks(datetime(1, 1, 1)) == 0

    def test_known_value(self):
        # DateTime(2000, 1, 1).Ticks
        assert to_ticks(datetime(2000, 1, 1)) == 630822816000000000

    def test_microseconds_are_ten_ticks(self):
        base = datetime(2024, 1, 1)
        assert to_ticks(base + timedelta(microseconds=1)) - to_ticks(base) == 10

    def test_aware_datetime_uses_wall_clock(self):
        naive = datetime(2024, 1, 1, 8, 30)
        aware = naive.replace(tzinfo=timezone.utc)
        assert to_ticks(aware) == to_ticks(naive)


class TestDefaultFileName:
    def test_matches_ticks_pattern(self):
        name = default_file_name(datetime(2024, 3, 14, 15, 9, 26))
        assert re.fullmatch(r"\d+\.pdf", name)

    def test_later_moment_sorts_later(self):
        earlier = default_file_name(datetime(2024, 1, 1))
        later = default_file_name(datetime(2024, 1, 2))
        assert int(later[:-4]) > int(earlier[:-4])


class TestRenderedDocument:
    def test_is_immutable(self):
        doc = RenderedDocument(file_name="a.pdf", data=b"%PDF")
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.file_name = "b.pdf"

    def test_size(self):
        assert RenderedDocument(file_name="a.pdf", data=b"12345").size == 5
