import numpy as np
import pytest

from fractus.output import write_single_image
from scripts.generate_cli_examples import RESOLUTION, Example, Expected, _verify


def _example(path, size=RESOLUTION):
    return Example(name="sample", args=[], expected=[Expected(path, size=size)])


def _write(path, width, height):
    write_single_image(np.zeros((height, width, 4), dtype=np.uint8), path)


def test_verify_accepts_image_at_requested_resolution(tmp_path):
    path = tmp_path / "ok.png"
    _write(path, *RESOLUTION)
    _verify(_example(path))


def test_verify_rejects_image_of_wrong_size(tmp_path):
    path = tmp_path / "small.png"
    _write(path, 8, 4)
    with pytest.raises(RuntimeError, match=r"\(8, 4\)"):
        _verify(_example(path))


def test_verify_rejects_missing_file(tmp_path):
    with pytest.raises(RuntimeError, match="was not created"):
        _verify(_example(tmp_path / "absent.png"))
