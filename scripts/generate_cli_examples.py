from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import PIL.Image

EXAMPLES_ROOT = Path("examples/cli-options")
RESOLUTION = (320, 160)
BASE_ARGS = ["--res", str(RESOLUTION[0]), str(RESOLUTION[1]), "--iters", "200"]


@dataclass
class Expected:
    path: Path
    is_dir: bool = False
    size: Optional[tuple[int, int]] = RESOLUTION


@dataclass
class Example:
    name: str
    args: list[str]
    expected: list[Expected]
    clean: list[Path] | None = None

    def full_args(self) -> list[str]:
        return [sys.executable, "explore.py", *self.args]


EXAMPLES: list[Example] = [
    Example(
        name="default",
        args=[*BASE_ARGS, "--output", str(EXAMPLES_ROOT / "default" / "fractal.png")],
        expected=[Expected(EXAMPLES_ROOT / "default" / "fractal.png")],
        clean=[EXAMPLES_ROOT / "default"],
    ),
    Example(
        name="flat",
        args=[*BASE_ARGS, "--color", "flat", "--output", str(EXAMPLES_ROOT / "flat" / "black-and-white.png")],
        expected=[Expected(EXAMPLES_ROOT / "flat" / "black-and-white.png")],
        clean=[EXAMPLES_ROOT / "flat"],
    ),
    Example(
        name="colormap",
        args=[*BASE_ARGS, "--color", "colormap", "--colormap", "inferno", "--output", str(EXAMPLES_ROOT / "colormap" / "inferno.png")],
        expected=[Expected(EXAMPLES_ROOT / "colormap" / "inferno.png")],
        clean=[EXAMPLES_ROOT / "colormap"],
    ),
    Example(
        name="viewport",
        args=[*BASE_ARGS, "--bl", "-0.49054109031733145", "0.5296658986175117", "--dim", "0.25", "0.125",
              "--output", str(EXAMPLES_ROOT / "viewport" / "detail.png")],
        expected=[Expected(EXAMPLES_ROOT / "viewport" / "detail.png")],
        clean=[EXAMPLES_ROOT / "viewport"],
    ),
    Example(
        name="tricorn",
        args=[*BASE_ARGS, "--iterate", "tricorn", "--bl", "-2.5", "-1.25", "--dim", "5", "2.5",
              "--output", str(EXAMPLES_ROOT / "tricorn" / "tricorn.png")],
        expected=[Expected(EXAMPLES_ROOT / "tricorn" / "tricorn.png")],
        clean=[EXAMPLES_ROOT / "tricorn"],
    ),
    Example(
        name="clicks",
        args=[*BASE_ARGS, "--click", "240", "80", "--click", "120", "60", "--click", "160", "90",
              "--gif", str(EXAMPLES_ROOT / "clicks" / "zoom.gif"),
              "--frame-dir", str(EXAMPLES_ROOT / "clicks" / "frames"),
              "--output", str(EXAMPLES_ROOT / "clicks" / "final.png")],
        expected=[
            Expected(EXAMPLES_ROOT / "clicks" / "zoom.gif"),
            Expected(EXAMPLES_ROOT / "clicks" / "frames", is_dir=True),
            Expected(EXAMPLES_ROOT / "clicks" / "final.png"),
        ],
        clean=[EXAMPLES_ROOT / "clicks"],
    ),
    Example(
        name="verbose",
        args=[*BASE_ARGS, "--verbose", "--output", str(EXAMPLES_ROOT / "verbose" / "diagnostic.png")],
        expected=[Expected(EXAMPLES_ROOT / "verbose" / "diagnostic.png")],
        clean=[EXAMPLES_ROOT / "verbose"],
    ),
]


def _ensure_clean(paths: Iterable[Path]) -> None:
    for path in paths:
        if path.exists():
            if path.is_dir():
                shutil.rmtree(path)
            else:
                path.unlink()


def _prepare(example: Example) -> None:
    _ensure_clean(example.clean or [])
    for expected in example.expected:
        expected.path.parent.mkdir(parents=True, exist_ok=True)


def _verify(example: Example) -> None:
    for expected in example.expected:
        if expected.is_dir:
            if not expected.path.is_dir():
                raise RuntimeError(f"Expected directory {expected.path} was not created")
            if not any(expected.path.iterdir()):
                raise RuntimeError(f"Directory {expected.path} is empty")
        elif not expected.path.is_file():
            raise RuntimeError(f"Expected file {expected.path} was not created")
        elif expected.size is not None:
            with PIL.Image.open(expected.path) as image:
                if image.size != expected.size:
                    raise RuntimeError(f"{expected.path} is {image.size}, expected {expected.size}")


def main() -> None:
    EXAMPLES_ROOT.mkdir(parents=True, exist_ok=True)
    for example in EXAMPLES:
        print(f"\n[cli-example] {example.name}")
        _prepare(example)
        subprocess.run(example.full_args(), check=True)
        _verify(example)
    print("\nAll CLI examples generated successfully.")


if __name__ == "__main__":
    main()
