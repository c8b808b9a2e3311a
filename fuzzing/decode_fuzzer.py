#!/usr/bin/env python3
import sys

import atheris

from fuzzing.fuzzed_data_provider import TgaminerFuzzedDataProvider

with atheris.instrument_imports():
    from fuzzing.utils import is_valid_byte_stream, prepare_tgaminer_fuzzing
    from tgaminer.high_level import decode
    from tgaminer.tgaexceptions import TGAException


def fuzz_one_input(data: bytes) -> None:
    if not is_valid_byte_stream(data):
        # Not worth continuing with this test case
        return

    fdp = TgaminerFuzzedDataProvider(data)
    strict = fdp.ConsumeBool()
    legacy_id_length = fdp.ConsumeBool()

    try:
        image = decode(
            fdp.ConsumeRemainingBytes(),
            legacy_id_length=legacy_id_length,
            strict=strict,
        )
    except TGAException:
        return
    assert len(image.data) == image.size


if __name__ == "__main__":
    prepare_tgaminer_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()
