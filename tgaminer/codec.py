"""Pixel data decoding for each TGA image type.

The pixel stream follows the header, the id field and the color map. Each
image type maps to one decoding function; the function is picked once per
image by `select_decoder` and fills a zero-initialized output buffer.
"""

import logging
from collections.abc import Callable

from tgaminer import settings
from tgaminer.colormap import ColorMap
from tgaminer.header import TGAHeader
from tgaminer.runlength import rldecode_monochrome, rldecode_rgb, rldecode_rgba
from tgaminer.tgaexceptions import (
    TGAException,
    TGAMalformedStream,
    TGATruncatedInput,
    TGAUnsupportedImageType,
    TGAUnsupportedPixelDepth,
)
from tgaminer.utils import InputCursor, OutputCursor, swap_red_blue

log = logging.getLogger(__name__)

# Image type codes
TYPE_NO_IMAGE = 0
TYPE_PALETTED = 1
TYPE_TRUECOLOR = 2
TYPE_MONOCHROME = 3
TYPE_RLE_PALETTED = 9
TYPE_RLE_TRUECOLOR = 10
TYPE_RLE_MONOCHROME = 11

# Struct formats of palette indices by bits per pixel
INDEX_FORMATS = {8: "<B", 16: "<H"}

# Longest run a single packet can describe
MAX_PACKET_PIXELS = 128

Decoder = Callable[[InputCursor, OutputCursor, TGAHeader, ColorMap], None]


def get_pixel_size(header: TGAHeader, cmap: ColorMap) -> int:
    """Bytes per output pixel: the palette entry size for color mapped
    images, the stored pixel size otherwise.
    """
    if header.has_color_map:
        return cmap.entry_size
    return header.bits // 8


def decode_nothing(
    src: InputCursor, out: OutputCursor, header: TGAHeader, cmap: ColorMap
) -> None:
    pass


def decode_paletted(
    src: InputCursor, out: OutputCursor, header: TGAHeader, cmap: ColorMap
) -> None:
    index_format = INDEX_FORMATS[header.bits]
    for _ in range(header.pixel_count):
        (index,) = src.unpack(index_format)
        out.write(cmap.lookup(index))


def decode_truecolor(
    src: InputCursor, out: OutputCursor, header: TGAHeader, cmap: ColorMap
) -> None:
    pixel_size = header.bits // 8
    out.write(src.read(out.remaining))
    swap_red_blue(out.buf, pixel_size)


def decode_monochrome(
    src: InputCursor, out: OutputCursor, header: TGAHeader, cmap: ColorMap
) -> None:
    out.write(src.read(out.remaining))


def decode_rle_truecolor(
    src: InputCursor, out: OutputCursor, header: TGAHeader, cmap: ColorMap
) -> None:
    packets = src.tail(TGAMalformedStream)
    if header.bits == 24:
        rldecode_rgb(packets, out, header.pixel_count)
    else:
        rldecode_rgba(packets, out, header.pixel_count)


def decode_rle_monochrome(
    src: InputCursor, out: OutputCursor, header: TGAHeader, cmap: ColorMap
) -> None:
    rldecode_monochrome(src.tail(TGAMalformedStream), out, header.pixel_count)


def _check_bits(
    header: TGAHeader, cmap: ColorMap, allowed: tuple[int, ...]
) -> None:
    # Stored pixels are copied as is, so a palette must not change their size
    if header.bits not in allowed or (cmap and cmap.entry_size != header.bits // 8):
        raise TGAUnsupportedPixelDepth(
            "Unsupported bits per pixel for image type %d: %d"
            % (header.image_type, header.bits)
        )


def select_decoder(
    header: TGAHeader, cmap: ColorMap, strict: bool | None = None
) -> Decoder:
    """Picks the decoding function for the image type and bit depth of `header`.

    `strict` defaults to `settings.STRICT`.
    """
    if strict is None:
        strict = settings.STRICT
    image_type = header.image_type

    if image_type == TYPE_NO_IMAGE:
        return decode_nothing

    if image_type == TYPE_PALETTED:
        if not cmap:
            raise TGAUnsupportedImageType(
                "Color mapped image type %d without a color map" % image_type
            )
        if header.bits not in INDEX_FORMATS:
            raise TGAUnsupportedPixelDepth(
                "Unsupported palette index size: %d bits" % header.bits
            )
        return decode_paletted

    if image_type == TYPE_TRUECOLOR:
        _check_bits(header, cmap, (24, 32))
        return decode_truecolor

    if image_type == TYPE_MONOCHROME:
        _check_bits(header, cmap, (8,))
        return decode_monochrome

    if image_type == TYPE_RLE_PALETTED:
        if not cmap:
            raise TGAUnsupportedImageType(
                "Color mapped image type %d without a color map" % image_type
            )
        log.warning("Compressed color mapped images are not supported, "
                    "leaving the image blank")
        return decode_nothing

    if image_type == TYPE_RLE_TRUECOLOR:
        _check_bits(header, cmap, (24, 32))
        return decode_rle_truecolor

    if image_type == TYPE_RLE_MONOCHROME:
        _check_bits(header, cmap, (8,))
        return decode_rle_monochrome

    if strict:
        raise TGAUnsupportedImageType("Unknown image type: %d" % image_type)
    log.warning("Unknown image type %d, leaving the image blank", image_type)
    return decode_nothing


def check_stream_length(
    src: InputCursor, decoder: Decoder, header: TGAHeader, pixel_size: int
) -> None:
    """Fails before the output buffer is allocated when `src` cannot hold
    the pixel data the header declares.
    """
    if decoder is decode_paletted:
        needed = header.pixel_count * (header.bits // 8)
        error: type[TGAException] = TGATruncatedInput
    elif decoder in (decode_truecolor, decode_monochrome):
        needed = header.pixel_count * pixel_size
        error = TGATruncatedInput
    elif decoder in (decode_rle_truecolor, decode_rle_monochrome):
        packets = -(-header.pixel_count // MAX_PACKET_PIXELS)
        needed = packets * (1 + pixel_size)
        error = TGAMalformedStream
    else:
        return
    if src.remaining < needed:
        raise error(
            "Pixel data needs at least %d bytes, %d available"
            % (needed, src.remaining)
        )


def decode_pixels(
    src: InputCursor,
    header: TGAHeader,
    cmap: ColorMap,
    pixel_size: int,
    strict: bool | None = None,
) -> bytes:
    """Decodes the pixel stream at `src` into a buffer of
    `width * height * pixel_size` bytes.
    """
    decoder = select_decoder(header, cmap, strict=strict)
    log.debug("decoding %r with %s", header, decoder.__name__)
    check_stream_length(src, decoder, header, pixel_size)
    out = OutputCursor(header.pixel_count * pixel_size)
    decoder(src, out, header, cmap)
    return out.getvalue()
