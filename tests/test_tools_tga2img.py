import pathlib

import pytest

from tests.helpers import make_tga
from tgaminer import settings
from tools import tga2img


class TestTGA2Img:
    @pytest.mark.parametrize("output_type", ["png", "bmp"])
    def test_convert(self, tmp_path: pathlib.Path, output_type: str) -> None:
        pytest.importorskip("PIL")
        src = tmp_path / "rgb.tga"
        src.write_bytes(make_tga(10, 2, 2, 24, b"\x83\x10\x20\x30"))
        outdir = tmp_path / "out"
        status = tga2img.main(["-O", str(outdir), "-t", output_type, str(src)])
        assert status == 0
        assert (outdir / ("rgb." + output_type)).exists()

    def test_failure_status(self, tmp_path: pathlib.Path) -> None:
        src = tmp_path / "bad.tga"
        src.write_bytes(b"\x00" * 4)
        status = tga2img.main(["-O", str(tmp_path / "out"), str(src)])
        assert status == 1

    def test_strict_is_per_call(self, tmp_path: pathlib.Path) -> None:
        src = tmp_path / "unknown.tga"
        src.write_bytes(make_tga(5, 1, 1, 24))
        status = tga2img.main(["-O", str(tmp_path / "out"), "--strict", str(src)])
        assert status == 1
        assert settings.STRICT is False
