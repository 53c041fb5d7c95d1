import json

import PIL.Image
import pytest

import explore


def _run(*args):
    return explore.main(list(args))


def test_renders_single_image(tmp_path):
    output = tmp_path / "fractal.png"
    assert _run("--res", "8", "4", "--iters", "20", "--color", "flat", "--output", str(output)) == 0
    with PIL.Image.open(output) as image:
        assert image.size == (8, 4)
        assert image.getpixel((0, 0)) == (255, 255, 255, 255)


def test_output_suffix_follows_format(tmp_path):
    _run("--res", "4", "2", "--iters", "5", "--output", str(tmp_path / "plain"))
    assert (tmp_path / "plain.png").is_file()


def test_click_sequence_writes_every_frame(tmp_path, capsys):
    output = tmp_path / "final.png"
    gif = tmp_path / "zoom.gif"
    frames = tmp_path / "frames"
    _run(
        "--res", "8", "4", "--iters", "30", "--color", "colormap", "--colormap", "viridis",
        "--click", "6", "2", "--click", "4", "2",
        "--gif", str(gif), "--frame-dir", str(frames), "--output", str(output), "--verbose",
    )
    assert sorted(p.name for p in frames.iterdir()) == ["frame000.png", "frame001.png", "frame002.png"]
    assert gif.is_file()
    assert output.is_file()
    out = capsys.readouterr().out
    assert "clicked pixel (6.0, 2.0) -> 0.0 + 0.0i" in out
    assert "size=1.0x0.5" in out


def test_request_file_is_overridden_by_flags(tmp_path, capsys):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"res": [6, 3], "iters": 10, "bl": [-1, -1]}))
    output = tmp_path / "fractal.png"
    _run("--request", str(request), "--res", "4", "2", "--output", str(output), "-v")
    with PIL.Image.open(output) as image:
        assert image.size == (4, 2)
    assert "origin=(-1.0, -1.0) size=4.0x2.0 iters=10" in capsys.readouterr().out


@pytest.mark.parametrize(
    "args",
    [
        ["--dim", "0", "1"],
        ["--iters", "0"],
        ["--res", "0", "4"],
        ["--colormap", "no-such-map", "--color", "colormap"],
        ["--output", "image.jpg"],
        ["--gif", "movie.mp4"],
        ["--iterate", "quartic"],
    ],
)
def test_invalid_arguments_exit_with_usage_error(tmp_path, monkeypatch, args):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        _run("--res", "4", "2", "--iters", "5", *args)
    assert excinfo.value.code == 2


def test_missing_request_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        _run("--request", str(tmp_path / "absent.json"))
    assert excinfo.value.code == 2


def test_request_file_with_invalid_encoding(tmp_path):
    request = tmp_path / "request.json"
    request.write_bytes(b'{"iters": "\xff"}')
    with pytest.raises(SystemExit) as excinfo:
        _run("--request", str(request), "--output", str(tmp_path / "fractal.png"))
    assert excinfo.value.code == 2
