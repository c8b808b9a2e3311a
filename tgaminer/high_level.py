"""Functions that can be used for the most common use-cases for tgaminer"""

import logging
import os.path

from tgaminer.codec import decode_pixels, get_pixel_size
from tgaminer.colormap import read_color_map
from tgaminer.header import read_header
from tgaminer.image import DecodedImage, ImageWriter, finalize_image
from tgaminer.tgaexceptions import TGATypeError
from tgaminer.utils import FileOrName, InputCursor, open_filename

log = logging.getLogger(__name__)


def decode(
    data: bytes, legacy_id_length: bool = True, strict: bool | None = None
) -> DecodedImage:
    """Decodes a complete TGA file held in memory.

    :param data: the whole file contents.
    :param legacy_id_length: take the id field length from the image
        descriptor byte (the legacy layout) instead
        of the id length byte at offset 0. The two are not interchangeable;
        a mismatch is logged as a warning.
    :param strict: fail on unknown image type codes instead of returning a
        blank image. Defaults to `tgaminer.settings.STRICT`.
    :return: the decoded image. Raises a TGAException subclass when the
        file cannot be decoded.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TGATypeError(f"Unsupported input type: {type(data)}")
    src = InputCursor(bytes(data))
    header = read_header(src, legacy_id_length=legacy_id_length)
    cmap = read_color_map(src, header)
    pixel_size = get_pixel_size(header, cmap)
    pixels = decode_pixels(src, header, cmap, pixel_size, strict=strict)
    return finalize_image(pixels, header.width, header.height, pixel_size)


def decode_file(
    tga_file: FileOrName,
    legacy_id_length: bool = True,
    strict: bool | None = None,
) -> DecodedImage:
    """Reads a TGA file fully into memory and decodes it.

    :param tga_file: Either a file path or a binary file-like object.
    :param legacy_id_length: see `decode`.
    :param strict: see `decode`.
    """
    with open_filename(tga_file, "rb") as fp:
        data = fp.read()
    log.debug("read %d bytes from %r", len(data), tga_file)
    return decode(data, legacy_id_length=legacy_id_length, strict=strict)


def extract_image(
    tga_file: FileOrName,
    output_dir: str,
    name: str | None = None,
    ext: str = ".png",
    legacy_id_length: bool = True,
    strict: bool | None = None,
) -> str:
    """Decodes a TGA file and saves the pixels with an ImageWriter.

    :param tga_file: Either a file path or a binary file-like object.
    :param output_dir: Directory to write the image to; created if missing.
    :param name: Base name of the written file. Defaults to the name of
        `tga_file` without its extension, or "image" for file objects.
    :param ext: ".png" or ".bmp".
    :return: the name of the written file, relative to `output_dir`.
    """
    image = decode_file(tga_file, legacy_id_length=legacy_id_length, strict=strict)
    if name is None:
        if isinstance(tga_file, (str, os.PathLike)):
            name = os.path.splitext(os.path.basename(tga_file))[0]
        else:
            name = "image"
    return ImageWriter(output_dir, ext=ext).export_image(image, name)
