"""Benchmarks for tgaminer.high_level.decode."""

from typing import Any

import pytest

from tests.helpers import make_tga
from tgaminer.high_level import decode

WIDTH = 256
HEIGHT = 256


class TestDecodeBenchmarks:
    """Benchmarks for each image type on a 256x256 image."""

    @pytest.fixture
    def truecolor(self) -> bytes:
        return make_tga(2, WIDTH, HEIGHT, 32, bytes(range(256)) * WIDTH * 4)

    @pytest.fixture
    def paletted(self) -> bytes:
        palette = bytes(range(256)) * 3
        return make_tga(1, WIDTH, HEIGHT, 8, bytes(range(256)) * HEIGHT, palette, 24)

    @pytest.fixture
    def rle_runs(self) -> bytes:
        # 128 pixel runs of one color
        packets = b"\xff\x10\x20\x30" * (WIDTH * HEIGHT // 128)
        return make_tga(10, WIDTH, HEIGHT, 24, packets)

    @pytest.fixture
    def rle_raw(self) -> bytes:
        # 128 pixel raw packets
        packet = b"\x7f" + bytes(range(128)) * 3
        return make_tga(10, WIDTH, HEIGHT, 24, packet * (WIDTH * HEIGHT // 128))

    def test_truecolor(self, benchmark: Any, truecolor: bytes) -> None:
        image = benchmark(decode, truecolor)
        assert image.size == WIDTH * HEIGHT * 4

    def test_paletted(self, benchmark: Any, paletted: bytes) -> None:
        image = benchmark(decode, paletted)
        assert image.size == WIDTH * HEIGHT * 3

    def test_rle_runs(self, benchmark: Any, rle_runs: bytes) -> None:
        image = benchmark(decode, rle_runs)
        assert image.size == WIDTH * HEIGHT * 3

    def test_rle_raw(self, benchmark: Any, rle_raw: bytes) -> None:
        image = benchmark(decode, rle_raw)
        assert image.size == WIDTH * HEIGHT * 3
