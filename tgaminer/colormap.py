import logging

from tgaminer.header import TGAHeader
from tgaminer.tgaexceptions import TGAMalformedStream, TGAUnsupportedColorMapDepth
from tgaminer.utils import InputCursor, bgr_to_rgb

log = logging.getLogger(__name__)

SUPPORTED_ENTRY_SIZES = (3, 4)


class ColorMap:
    """Palette table stored as B,G,R[,A] entries of `entry_size` bytes."""

    def __init__(self, data: bytes = b"", entry_size: int = 0) -> None:
        self.data = data
        self.entry_size = entry_size

    def __repr__(self) -> str:
        return "<ColorMap entries=%d entry_size=%d>" % (len(self), self.entry_size)

    def __len__(self) -> int:
        if not self.entry_size:
            return 0
        return len(self.data) // self.entry_size

    def __bool__(self) -> bool:
        return self.entry_size != 0

    def lookup(self, index: int) -> bytes:
        """Returns entry `index` reordered to R,G,B[,A]."""
        offset = index * self.entry_size
        entry = self.data[offset : offset + self.entry_size]
        if len(entry) != self.entry_size:
            raise TGAMalformedStream(
                "Color map index %d out of range (%d entries)" % (index, len(self))
            )
        return bgr_to_rgb(entry)


def read_color_map(cursor: InputCursor, header: TGAHeader) -> ColorMap:
    """Reads the palette described by `header`, or returns an empty one."""
    if not header.has_color_map:
        return ColorMap()

    entry_size = header.color_map_entry_size // 8
    if entry_size not in SUPPORTED_ENTRY_SIZES:
        raise TGAUnsupportedColorMapDepth(
            "Unsupported color map entry size: %d bits"
            % header.color_map_entry_size
        )

    data = cursor.read(header.color_map_length * entry_size)
    cmap = ColorMap(data, entry_size)
    log.debug("read color map: %r", cmap)
    return cmap
