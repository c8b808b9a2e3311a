#!/usr/bin/env python3
"""Dump the header and decoded metadata of TGA files"""

import logging
import sys
from argparse import ArgumentParser
from typing import TextIO

import tgaminer
from tgaminer.header import HEADER_FIELDS, parse_header
from tgaminer.high_level import decode
from tgaminer.tgaexceptions import TGAException

logging.basicConfig()


def dumptga(
    outfp: TextIO,
    fname: str,
    legacy_id_length: bool = True,
    strict: bool | None = None,
) -> bool:
    with open(fname, "rb") as fp:
        data = fp.read()

    outfp.write("%s:\n" % fname)
    try:
        header = parse_header(data, legacy_id_length=legacy_id_length)
    except TGAException as e:
        outfp.write("  error: %s\n" % e)
        return False

    for _, name in HEADER_FIELDS:
        outfp.write("  %-21s %d\n" % (name, getattr(header, name)))
    outfp.write("  %-21s %r\n" % ("image_id", header.image_id))
    if header.id_length_mismatch:
        outfp.write("  note: id field length taken from image_descriptor\n")

    try:
        image = decode(data, legacy_id_length=legacy_id_length, strict=strict)
    except TGAException as e:
        outfp.write("  error: %s\n" % e)
        return False

    outfp.write("  %-21s %s\n" % ("format", image.format))
    outfp.write("  %-21s %d\n" % ("size", image.size))
    return True


def create_parser() -> ArgumentParser:
    parser = ArgumentParser(description=__doc__, add_help=True)
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

    parse_params = parser.add_argument_group(
        "Parser",
        description="Used during TGA decoding",
    )
    parse_params.add_argument(
        "--strict",
        default=False,
        action="store_true",
        help="Fail on unknown image types instead of leaving the image blank.",
    )
    parse_params.add_argument(
        "--id-length",
        choices=("descriptor", "field"),
        default="descriptor",
        help="Where the length of the image id field is read from: the image "
        "descriptor byte (default, legacy layout) or the id length byte.",
    )

    output_params = parser.add_argument_group(
        "Output",
        description="Used during output generation.",
    )
    output_params.add_argument(
        "--outfile",
        "-o",
        type=str,
        default="-",
        help='Path to file where output is written. Or "-" (default) to '
        "write to stdout.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(args=argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    legacy_id_length = args.id_length == "descriptor"

    if args.outfile == "-":
        outfp = sys.stdout
    else:
        outfp = open(args.outfile, "w")  # noqa: SIM115

    ok = True
    try:
        for fname in args.files:
            ok = (
                dumptga(
                    outfp,
                    fname,
                    legacy_id_length=legacy_id_length,
                    strict=args.strict or None,
                )
                and ok
            )
    finally:
        if outfp is not sys.stdout:
            outfp.close()
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
