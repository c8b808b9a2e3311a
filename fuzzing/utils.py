"""Utilities shared across the TGA fuzzing harnesses"""

import logging

import atheris

from tgaminer.header import HEADER_SIZE


def prepare_tgaminer_fuzzing() -> None:
    """Used to disable logging of the tgaminer module"""
    logging.getLogger("tgaminer").setLevel(logging.CRITICAL)


@atheris.instrument_func  # type: ignore[misc]
def is_valid_byte_stream(data: bytes) -> bool:
    """Quick check to see if this is worth of passing to atheris
    :return: Whether the byte-stream holds at least a header
    """
    return len(data) >= HEADER_SIZE
