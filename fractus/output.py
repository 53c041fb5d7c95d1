"""Writing rendered buffers to image files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import imageio
import numpy as np
import PIL.Image


def to_image(buffer: np.ndarray) -> PIL.Image.Image:
    return PIL.Image.fromarray(buffer)


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def write_single_image(buffer: np.ndarray, output_path: Path, image_format: str = "png") -> Path:
    """Write ``buffer`` to ``output_path`` using the provided format."""

    image = to_image(buffer)
    pil_format = _pil_format_name(image_format)
    if pil_format == "JPEG":
        image = image.convert("RGB")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output_path), format=pil_format)
    return output_path


def write_frame_sequence(
    buffer: np.ndarray,
    frame_dir: Path,
    index: int,
    digits: int,
    image_format: str = "png",
    prefix: str = "frame",
) -> Path:
    """Persist a frame in a numbered sequence inside ``frame_dir``."""

    frame_path = frame_dir / f"{prefix}{index:0{digits}d}.{image_format}"
    return write_single_image(buffer, frame_path, image_format)


class FrameWriters:
    """Fan rendered frames out to the configured destinations.

    ``duration`` is the per-frame GIF display time in milliseconds.
    """

    def __init__(
        self,
        gif_path: Optional[Path] = None,
        frame_dir: Optional[Path] = None,
        frame_digits: int = 3,
        image_format: str = "png",
        duration: int = 500,
    ) -> None:
        self.frame_dir = frame_dir
        self.frame_digits = frame_digits
        self.image_format = image_format
        self._gif_writer: Any = None
        if gif_path is not None:
            gif_path.parent.mkdir(parents=True, exist_ok=True)
            self._gif_writer = imageio.get_writer(str(gif_path), mode="I", duration=duration, loop=0)

    def write(self, frame_index: int, buffer: np.ndarray) -> None:
        if self._gif_writer is not None:
            self._gif_writer.append_data(buffer)
        if self.frame_dir is not None:
            write_frame_sequence(buffer, self.frame_dir, frame_index, self.frame_digits, self.image_format)

    def close(self) -> None:
        if self._gif_writer is not None:
            self._gif_writer.close()
            self._gif_writer = None

    def __enter__(self) -> FrameWriters:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
