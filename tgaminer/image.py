import logging
import os
import os.path
from typing import Literal

from tgaminer.tgaexceptions import TGAMalformedStream, TGAUnsupportedPixelDepth

log = logging.getLogger(__name__)

ImageFormat = Literal["Monochrome", "RGB", "RGBA", "Undefined"]

FORMAT_MONOCHROME: ImageFormat = "Monochrome"
FORMAT_RGB: ImageFormat = "RGB"
FORMAT_RGBA: ImageFormat = "RGBA"
FORMAT_UNDEFINED: ImageFormat = "Undefined"

PIXEL_SIZE_FORMATS: dict[int, ImageFormat] = {
    1: FORMAT_MONOCHROME,
    3: FORMAT_RGB,
    4: FORMAT_RGBA,
}

PIL_MODES = {
    FORMAT_MONOCHROME: "L",
    FORMAT_RGB: "RGB",
    FORMAT_RGBA: "RGBA",
}

PIL_ERROR_MESSAGE = (
    "Could not import Pillow. This dependency of tgaminer is not "
    "installed by default. You need it to save decoded images as PNG or BMP. "
    "Install it with `pip install 'tgaminer[image]'`"
)


def bytes_per_pixel(fmt: ImageFormat) -> int:
    for size, name in PIXEL_SIZE_FORMATS.items():
        if name == fmt:
            return size
    return 0


def resolve_format(pixel_size: int) -> ImageFormat:
    """Maps the size of an output pixel in bytes to its format tag."""
    try:
        return PIXEL_SIZE_FORMATS[pixel_size]
    except KeyError:
        raise TGAUnsupportedPixelDepth(
            "Unsupported pixel size: %d bytes" % pixel_size
        ) from None


class DecodedImage:
    """A decoded image as a flat buffer of R,G,B[,A] or gray pixels.

    Rows are stored in file order; the origin bits of the image descriptor
    are not applied.
    """

    def __init__(
        self,
        data: bytes = b"",
        width: int = 0,
        height: int = 0,
        format: ImageFormat = FORMAT_UNDEFINED,
    ) -> None:
        self.data = data
        self.width = width
        self.height = height
        self.format = format

    def __repr__(self) -> str:
        return "<%s %s %dx%d>" % (
            self.__class__.__name__,
            self.format,
            self.width,
            self.height,
        )

    @property
    def bytes_per_pixel(self) -> int:
        return bytes_per_pixel(self.format)

    @property
    def size(self) -> int:
        """Total size of the pixel buffer in bytes."""
        return self.width * self.height * self.bytes_per_pixel

    @property
    def mode(self) -> str | None:
        """The matching Pillow image mode, if any."""
        return PIL_MODES.get(self.format)


def finalize_image(
    data: bytes, width: int, height: int, pixel_size: int
) -> DecodedImage:
    image = DecodedImage(data, width, height, resolve_format(pixel_size))
    if len(image.data) != image.size:
        raise TGAMalformedStream(
            "Decoded %d bytes for a %d byte image" % (len(image.data), image.size)
        )
    return image


class ImageWriter:
    """Write decoded images to files

    Supports PNG and BMP through Pillow, and raw pixel dumps
    """

    def __init__(self, outdir: str, ext: str = ".png") -> None:
        self.outdir = outdir
        self.ext = ext
        if not os.path.exists(self.outdir):
            os.makedirs(self.outdir)

    def export_image(self, image: DecodedImage, name: str) -> str:
        """Save a DecodedImage to disk"""
        if image.mode is None or not image.size:
            return self._save_raw(image, name)
        return self._save_pil(image, name)

    def _save_pil(self, image: DecodedImage, name: str) -> str:
        """Save an image with an encoding Pillow picks from the extension"""
        try:
            from PIL import Image  # type: ignore[import]
        except ImportError:
            raise ImportError(PIL_ERROR_MESSAGE)

        name, path = self._create_unique_image_name(name, self.ext)
        img = Image.frombytes(image.mode, (image.width, image.height), image.data, "raw")
        with open(path, "wb") as fp:
            img.save(fp, format=self.ext.lstrip(".").upper())
        log.debug("wrote %r to %s", image, path)
        return name

    def _save_raw(self, image: DecodedImage, name: str) -> str:
        """Save the pixel buffer as is"""
        ext = ".%s.%dx%d.img" % (image.format, image.width, image.height)
        name, path = self._create_unique_image_name(name, ext)
        with open(path, "wb") as fp:
            fp.write(image.data)
        return name

    def _create_unique_image_name(self, basename: str, ext: str) -> tuple[str, str]:
        name = basename + ext
        path = os.path.join(self.outdir, name)
        img_index = 0
        while os.path.exists(path):
            name = "%s.%d%s" % (basename, img_index, ext)
            path = os.path.join(self.outdir, name)
            img_index += 1
        return name, path
