import pytest

from tgaminer.runlength import (
    rldecode,
    rldecode_monochrome,
    rldecode_rgb,
    rldecode_rgba,
)
from tgaminer.tgaexceptions import TGAMalformedStream
from tgaminer.utils import InputCursor, OutputCursor


def run(func, data: bytes, pixel_count: int, pixel_size: int) -> bytes:
    out = OutputCursor(pixel_count * pixel_size)
    func(InputCursor(data, error=TGAMalformedStream), out, pixel_count)
    return out.getvalue()


class TestMonochrome:
    def test_run_packet(self) -> None:
        assert run(rldecode_monochrome, b"\x83\x2a", 4, 1) == b"\x2a" * 4

    def test_raw_packet(self) -> None:
        assert run(rldecode_monochrome, b"\x02\x01\x02\x03", 3, 1) == b"\x01\x02\x03"

    def test_mixed_packets(self) -> None:
        data = b"\x81\x07\x01\x08\x09"
        assert run(rldecode_monochrome, data, 4, 1) == b"\x07\x07\x08\x09"

    def test_longest_run(self) -> None:
        assert run(rldecode_monochrome, b"\xff\x05", 128, 1) == b"\x05" * 128

    def test_trailing_bytes_ignored(self) -> None:
        assert run(rldecode_monochrome, b"\x80\x01\x80\x02", 1, 1) == b"\x01"


class TestTrueColor:
    def test_run_packet_reorders(self) -> None:
        assert run(rldecode_rgb, b"\x80\x10\x20\x30", 1, 3) == b"\x30\x20\x10"

    def test_run_packet_replicates(self) -> None:
        data = b"\x82\x10\x20\x30"
        assert run(rldecode_rgb, data, 3, 3) == b"\x30\x20\x10" * 3

    def test_raw_packet_preserves_order(self) -> None:
        data = b"\x01\x10\x20\x30\x40\x50\x60"
        assert run(rldecode_rgb, data, 2, 3) == b"\x30\x20\x10\x60\x50\x40"

    def test_rgba_carries_alpha(self) -> None:
        data = b"\x81\x10\x20\x30\x80\x00\x01\x02\x03\x04"
        expected = b"\x30\x20\x10\x80" * 2 + b"\x03\x02\x01\x04"
        assert run(rldecode_rgba, data, 3, 4) == expected


class TestMalformed:
    def test_packet_overruns_image(self) -> None:
        with pytest.raises(TGAMalformedStream):
            run(rldecode_monochrome, b"\x84\x2a", 4, 1)

    def test_missing_run_pixel(self) -> None:
        with pytest.raises(TGAMalformedStream):
            run(rldecode_rgb, b"\x81\x10\x20", 2, 3)

    def test_missing_raw_pixels(self) -> None:
        with pytest.raises(TGAMalformedStream):
            run(rldecode_monochrome, b"\x03\x01\x02", 4, 1)

    def test_missing_packet(self) -> None:
        with pytest.raises(TGAMalformedStream):
            run(rldecode_monochrome, b"\x81\x01", 4, 1)

    def test_empty_image_reads_nothing(self) -> None:
        assert run(rldecode_rgb, b"", 0, 3) == b""


def test_rldecode_without_reorder() -> None:
    out = OutputCursor(6)
    rldecode(InputCursor(b"\x81\x01\x02\x03"), out, 2, 3, reorder=False)
    assert out.getvalue() == b"\x01\x02\x03" * 2
