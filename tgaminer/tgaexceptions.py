__all__ = [
    "TGAException",
    "TGATypeError",
    "TGATruncatedInput",
    "TGAUnsupportedColorMapDepth",
    "TGAUnsupportedPixelDepth",
    "TGAUnsupportedImageType",
    "TGAMalformedStream",
]


class TGAException(Exception):
    """Base class for all errors raised while decoding a TGA image."""


class TGATypeError(TGAException, TypeError):
    """Raised when an argument of an unsupported type is passed."""


class TGATruncatedInput(TGAException, EOFError):
    """Raised when fewer bytes are available than a read step requires."""


class TGAUnsupportedColorMapDepth(TGAException, ValueError):
    """Raised when color map entries are neither 24 nor 32 bits wide."""


class TGAUnsupportedPixelDepth(TGAException, ValueError):
    """Raised when the bits per pixel do not fit the image type."""


class TGAUnsupportedImageType(TGAException, NotImplementedError):
    """Raised when the image type code cannot be decoded."""


class TGAMalformedStream(TGAException, ValueError):
    """Raised when pixel data would be read or written out of bounds."""
