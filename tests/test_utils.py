import io
import pathlib

import pytest

from tgaminer.tgaexceptions import (
    TGAMalformedStream,
    TGATruncatedInput,
    TGATypeError,
)
from tgaminer.utils import (
    InputCursor,
    OutputCursor,
    bgr_to_rgb,
    open_filename,
    swap_red_blue,
)


class TestOpenFilename:
    def test_string_input(self, tmp_path: pathlib.Path) -> None:
        path = tmp_path / "a.tga"
        path.write_bytes(b"abc")
        of = open_filename(str(path), "rb")
        assert of.closing
        with of as fp:
            assert fp.read() == b"abc"
        assert fp.closed

    def test_pathlib_input(self, tmp_path: pathlib.Path) -> None:
        path = tmp_path / "a.tga"
        path.write_bytes(b"abc")
        with open_filename(path, "rb") as fp:
            assert fp.read() == b"abc"

    def test_file_input(self) -> None:
        bio = io.BytesIO(b"abc")
        with open_filename(bio) as fp:
            assert fp is bio
        assert not bio.closed

    def test_unsupported_input(self) -> None:
        with pytest.raises(TGATypeError):
            open_filename(1)  # type: ignore[arg-type]


class TestInputCursor:
    def test_read_advances(self) -> None:
        cursor = InputCursor(b"\x01\x02\x03\x04")
        assert cursor.read_byte() == 1
        assert cursor.read(2) == b"\x02\x03"
        assert cursor.remaining == 1

    def test_unpack_little_endian(self) -> None:
        cursor = InputCursor(b"\x34\x12\xff")
        assert cursor.unpack("<H") == (0x1234,)
        assert cursor.unpack("<B") == (0xFF,)

    def test_read_past_end(self) -> None:
        cursor = InputCursor(b"\x01\x02")
        with pytest.raises(TGATruncatedInput):
            cursor.read(3)
        assert cursor.pos == 0

    def test_limit(self) -> None:
        cursor = InputCursor(b"\x01\x02\x03", limit=2)
        cursor.read(2)
        with pytest.raises(TGATruncatedInput):
            cursor.read_byte()

    def test_tail_error(self) -> None:
        cursor = InputCursor(b"\x01\x02\x03")
        cursor.read_byte()
        tail = cursor.tail(TGAMalformedStream)
        assert tail.read(2) == b"\x02\x03"
        with pytest.raises(TGAMalformedStream):
            tail.read_byte()
        # the parent cursor is left where it was
        assert cursor.pos == 1


class TestOutputCursor:
    def test_zero_filled(self) -> None:
        assert OutputCursor(4).getvalue() == b"\x00" * 4

    def test_write_and_fill(self) -> None:
        out = OutputCursor(5)
        out.write(b"\x01")
        out.fill(b"\x02\x03", 2)
        assert out.getvalue() == b"\x01\x02\x03\x02\x03"
        assert out.remaining == 0

    def test_write_past_end(self) -> None:
        out = OutputCursor(2)
        with pytest.raises(TGAMalformedStream):
            out.fill(b"\x01", 3)


@pytest.mark.parametrize(
    ("pixels", "pixel_size", "expected"),
    [
        (b"\x01\x02\x03\x04\x05\x06", 3, b"\x03\x02\x01\x06\x05\x04"),
        (b"\x01\x02\x03\x04\x05\x06\x07\x08", 4, b"\x03\x02\x01\x04\x07\x06\x05\x08"),
        (b"", 3, b""),
    ],
)
def test_swap_red_blue(pixels: bytes, pixel_size: int, expected: bytes) -> None:
    buf = bytearray(pixels)
    swap_red_blue(buf, pixel_size)
    assert bytes(buf) == expected


@pytest.mark.parametrize(
    ("pixel", "expected"),
    [
        (b"\x10\x20\x30", b"\x30\x20\x10"),
        (b"\x10\x20\x30\x40", b"\x30\x20\x10\x40"),
    ],
)
def test_bgr_to_rgb(pixel: bytes, expected: bytes) -> None:
    assert bgr_to_rgb(pixel) == expected
