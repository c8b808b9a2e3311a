"""Miscellaneous Routines."""

import io
import pathlib
from struct import calcsize, unpack_from
from typing import Any, BinaryIO, Union, cast

from tgaminer.tgaexceptions import (
    TGAException,
    TGAMalformedStream,
    TGATruncatedInput,
    TGATypeError,
)

FileOrName = Union[pathlib.PurePath, str, io.IOBase]


class open_filename:
    """Context manager that allows opening a filename
    (str or pathlib.PurePath type is supported) and closes it on exit,
    (just like `open`), but does nothing for file-like objects.
    """

    def __init__(self, filename: FileOrName, *args: Any, **kwargs: Any) -> None:
        if isinstance(filename, pathlib.PurePath):
            filename = str(filename)
        if isinstance(filename, str):
            self.file_handler: BinaryIO = open(filename, *args, **kwargs)  # noqa: SIM115
            self.closing = True
        elif isinstance(filename, io.IOBase):
            self.file_handler = cast(BinaryIO, filename)
            self.closing = False
        else:
            raise TGATypeError(f"Unsupported input type: {type(filename)}")

    def __enter__(self) -> BinaryIO:
        return self.file_handler

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if self.closing:
            self.file_handler.close()


class InputCursor:
    """Read position over an immutable byte sequence.

    Every read is checked against `limit`; running past it raises `error`,
    which is TGATruncatedInput for fixed-layout parts of the file and
    TGAMalformedStream inside run-length packets.
    """

    def __init__(
        self,
        data: bytes,
        pos: int = 0,
        limit: int | None = None,
        error: type[TGAException] = TGATruncatedInput,
    ) -> None:
        self.data = data
        self.pos = pos
        self.limit = len(data) if limit is None else min(limit, len(data))
        self.error = error

    def __repr__(self) -> str:
        return "<InputCursor pos=%d limit=%d>" % (self.pos, self.limit)

    @property
    def remaining(self) -> int:
        return self.limit - self.pos

    def _check(self, n: int) -> None:
        if n < 0 or self.pos + n > self.limit:
            raise self.error(
                "Cannot read %d bytes at offset %d (%d available)"
                % (n, self.pos, self.remaining)
            )

    def read(self, n: int) -> bytes:
        self._check(n)
        chunk = self.data[self.pos : self.pos + n]
        self.pos += n
        return chunk

    def read_byte(self) -> int:
        self._check(1)
        b = self.data[self.pos]
        self.pos += 1
        return b

    def unpack(self, fmt: str) -> tuple[Any, ...]:
        size = calcsize(fmt)
        self._check(size)
        values = unpack_from(fmt, self.data, self.pos)
        self.pos += size
        return values

    def tail(self, error: type[TGAException] | None = None) -> "InputCursor":
        """Returns a new cursor over the unread part.

        The new cursor raises `error` when given, the same error otherwise.
        """
        return InputCursor(self.data, self.pos, self.limit, error or self.error)


class OutputCursor:
    """Write position over a zero-filled output buffer of fixed size."""

    def __init__(self, size: int) -> None:
        self.buf = bytearray(size)
        self.pos = 0

    def __repr__(self) -> str:
        return "<OutputCursor pos=%d size=%d>" % (self.pos, len(self.buf))

    @property
    def remaining(self) -> int:
        return len(self.buf) - self.pos

    def _check(self, n: int) -> None:
        if self.pos + n > len(self.buf):
            raise TGAMalformedStream(
                "Cannot write %d bytes at offset %d (%d left in output)"
                % (n, self.pos, self.remaining)
            )

    def write(self, chunk: bytes) -> None:
        n = len(chunk)
        self._check(n)
        self.buf[self.pos : self.pos + n] = chunk
        self.pos += n

    def fill(self, chunk: bytes, count: int) -> None:
        """Writes `chunk` `count` times in a row."""
        self.write(chunk * count)

    def getvalue(self) -> bytes:
        return bytes(self.buf)


def swap_red_blue(buf: bytearray, pixel_size: int) -> None:
    """Swaps byte offsets 0 and 2 of every pixel in place (BGR[A] <-> RGB[A])."""
    buf[0::pixel_size], buf[2::pixel_size] = buf[2::pixel_size], buf[0::pixel_size]


def bgr_to_rgb(pixel: bytes) -> bytes:
    """Reorders one B,G,R[,A] pixel to R,G,B[,A]."""
    return pixel[2::-1] + pixel[3:]
