import logging

from tgaminer.utils import InputCursor

log = logging.getLogger(__name__)

HEADER_SIZE = 18

# (struct format, attribute name), in file order. All fields little endian.
HEADER_FIELDS = [
    ("<B", "idlen"),
    ("<B", "color_map_type"),
    ("<B", "image_type"),
    ("<H", "color_map_origin"),
    ("<H", "color_map_length"),
    ("<B", "color_map_entry_size"),
    ("<H", "x_origin"),
    ("<H", "y_origin"),
    ("<H", "width"),
    ("<H", "height"),
    ("<B", "bits"),
    ("<B", "image_descriptor"),
]


class TGAHeader:
    """The fixed 18-byte header followed by the image identification field.

    `id_length_mismatch` is set when the id field length taken from the
    image descriptor byte (legacy layout) disagrees with the id length byte.
    The two layouts place the color map and pixel data at different offsets.
    """

    idlen: int
    color_map_type: int
    image_type: int
    color_map_origin: int
    color_map_length: int
    color_map_entry_size: int
    x_origin: int
    y_origin: int
    width: int
    height: int
    bits: int
    image_descriptor: int

    def __init__(self) -> None:
        for _, name in HEADER_FIELDS:
            setattr(self, name, 0)
        self.image_id = b""
        self.id_length_mismatch = False

    def __repr__(self) -> str:
        return "<TGAHeader type=%d %dx%d bits=%d cmap=%d/%d>" % (
            self.image_type,
            self.width,
            self.height,
            self.bits,
            self.color_map_length,
            self.color_map_entry_size,
        )

    @property
    def has_color_map(self) -> bool:
        return self.color_map_type == 1

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def asdict(self) -> dict[str, int]:
        return {name: getattr(self, name) for _, name in HEADER_FIELDS}


def read_header(cursor: InputCursor, legacy_id_length: bool = True) -> TGAHeader:
    """Reads the header fields and the id field, advancing `cursor`.

    With `legacy_id_length` the image descriptor byte is taken as the length
    of the id field instead of the id length byte at offset 0.
    """
    header = TGAHeader()
    for field_format, name in HEADER_FIELDS:
        (value,) = cursor.unpack(field_format)
        setattr(header, name, value)

    if legacy_id_length:
        id_length = header.image_descriptor
        if header.idlen != header.image_descriptor:
            header.id_length_mismatch = True
            log.warning(
                "Reading %d id bytes from the image descriptor byte, "
                "id length byte says %d",
                header.image_descriptor,
                header.idlen,
            )
    else:
        id_length = header.idlen
    header.image_id = cursor.read(id_length)

    log.debug("read header: %r", header)
    return header


def parse_header(data: bytes, legacy_id_length: bool = True) -> TGAHeader:
    return read_header(InputCursor(data), legacy_id_length=legacy_id_length)
