from struct import pack


def make_header(
    image_type: int,
    width: int = 0,
    height: int = 0,
    bits: int = 0,
    idlen: int = 0,
    color_map_type: int = 0,
    color_map_origin: int = 0,
    color_map_length: int = 0,
    color_map_entry_size: int = 0,
    x_origin: int = 0,
    y_origin: int = 0,
    image_descriptor: int = 0,
) -> bytes:
    return pack(
        "<BBBHHBHHHHBB",
        idlen,
        color_map_type,
        image_type,
        color_map_origin,
        color_map_length,
        color_map_entry_size,
        x_origin,
        y_origin,
        width,
        height,
        bits,
        image_descriptor,
    )


def make_tga(
    image_type: int,
    width: int,
    height: int,
    bits: int,
    pixels: bytes = b"",
    palette: bytes = b"",
    palette_bits: int = 0,
    image_id: bytes = b"",
) -> bytes:
    """Builds a TGA file whose id length byte and image descriptor both hold
    the id field length, so it decodes the same with either id layout.
    """
    entry_size = palette_bits // 8
    header = make_header(
        image_type,
        width,
        height,
        bits,
        idlen=len(image_id),
        color_map_type=1 if palette_bits else 0,
        color_map_length=len(palette) // entry_size if entry_size else 0,
        color_map_entry_size=palette_bits,
        image_descriptor=len(image_id),
    )
    return header + image_id + palette + pixels
