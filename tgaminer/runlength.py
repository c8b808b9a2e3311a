#
# RunLength decoder for TGA image types 10 and 11, based on the Truevision
# TGA File Format Specification version 2.0.
#
# Each packet starts with a header byte. The low 7 bits plus one give the
# number of pixels in the packet; the high bit tells a run-length packet
# (one pixel value repeated) from a raw packet (that many literal pixels).
#

from tgaminer.tgaexceptions import TGAMalformedStream
from tgaminer.utils import InputCursor, OutputCursor, bgr_to_rgb

RLE_PACKET = 0x80  # High bit of the packet header
RUN_MASK = 0x7F


def rldecode(
    src: InputCursor,
    out: OutputCursor,
    pixel_count: int,
    pixel_size: int,
    reorder: bool = True,
) -> None:
    """Decodes packets from `src` into `out` until `pixel_count` pixels are written.

    Pixels are `pixel_size` bytes wide and, when `reorder` is true, stored
    as B,G,R[,A] and written as R,G,B[,A].
    """
    produced = 0
    while produced < pixel_count:
        header = src.read_byte()
        count = (header & RUN_MASK) + 1
        if pixel_count < produced + count:
            raise TGAMalformedStream(
                "Packet of %d pixels overruns image of %d pixels at pixel %d"
                % (count, pixel_count, produced)
            )

        # Repeated pixel run
        if header & RLE_PACKET:
            pixel = src.read(pixel_size)
            if reorder:
                pixel = bgr_to_rgb(pixel)
            out.fill(pixel, count)

        # Literal run
        else:
            if reorder:
                for _ in range(count):
                    out.write(bgr_to_rgb(src.read(pixel_size)))
            else:
                out.write(src.read(count * pixel_size))

        produced += count


def rldecode_monochrome(src: InputCursor, out: OutputCursor, pixel_count: int) -> None:
    rldecode(src, out, pixel_count, 1, reorder=False)


def rldecode_rgb(src: InputCursor, out: OutputCursor, pixel_count: int) -> None:
    rldecode(src, out, pixel_count, 3)


def rldecode_rgba(src: InputCursor, out: OutputCursor, pixel_count: int) -> None:
    rldecode(src, out, pixel_count, 4)
