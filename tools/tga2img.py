#!/usr/bin/env python3
"""Converts TGA images to PNG or BMP files."""

import argparse
import logging
import os.path
import sys

import tgaminer
from tgaminer.high_level import extract_image
from tgaminer.tgaexceptions import TGAException

logging.basicConfig()

log = logging.getLogger(__name__)

OUTPUT_TYPES = ("png", "bmp")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, add_help=True)
    parser.add_argument(
        "files",
        type=str,
        default=None,
        nargs="+",
        help="One or more paths to TGA files.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"tgaminer v{tgaminer.__version__}",
    )
    parser.add_argument(
        "--debug",
        "-d",
        default=False,
        action="store_true",
        help="Use debug logging level.",
    )
    parser.add_argument(
        "--strict",
        default=False,
        action="store_true",
        help="Fail on unknown image types instead of leaving the image blank.",
    )
    parser.add_argument(
        "--id-length",
        choices=("descriptor", "field"),
        default="descriptor",
        help="Where the length of the image id field is read from.",
    )
    parser.add_argument(
        "--output-dir",
        "-O",
        default=".",
        help="Directory the converted images are written to.",
    )
    parser.add_argument(
        "--output_type",
        "-t",
        type=str,
        default="png",
        choices=OUTPUT_TYPES,
        help="Type of the written images.",
    )
    return parser


def main(args: list[str] | None = None) -> int:
    P = create_parser()
    A = P.parse_args(args=args)

    if A.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    ext = "." + A.output_type
    failed = 0
    for fname in A.files:
        try:
            name = extract_image(
                fname,
                A.output_dir,
                ext=ext,
                legacy_id_length=A.id_length == "descriptor",
                strict=A.strict or None,
            )
        except TGAException as e:
            log.error("%s: %s", fname, e)
            failed += 1
            continue
        print(os.path.join(A.output_dir, name))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
