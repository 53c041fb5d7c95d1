"""Translate ``/generate`` style JSON request bodies into rendered images.

A request body may carry any of::

    {"bl": [re, im], "dim": [width, height], "res": [width_px, height_px], "iters": n}

Omitted fields fall back to the base configuration.
"""

from __future__ import annotations

import json
from dataclasses import replace
from numbers import Integral, Real
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .complexmath import Complex
from .config import DEFAULT_CONFIG, ConfigError, validate_config
from .mapping import Resolution, Viewport
from .output import write_single_image
from .renderer import FractalConfig, render_frame

REQUEST_FIELDS = ("bl", "dim", "res", "iters")
DEFAULT_OUTPUT = Path("fractal.png")


def _pair(payload: Mapping[str, Any], key: str, kind: type) -> tuple:
    value = payload[key]
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"'{key}' must be a list of two numbers.")
    for item in value:
        if isinstance(item, bool) or not isinstance(item, kind):
            raise ConfigError(f"'{key}' must be a list of two {'integers' if kind is Integral else 'numbers'}.")
    return value[0], value[1]


def config_from_request(payload: Mapping[str, Any], base: FractalConfig = DEFAULT_CONFIG) -> FractalConfig:
    """Overlay the fields present in ``payload`` on ``base`` and validate the result."""

    if not isinstance(payload, Mapping):
        raise ConfigError("request body must be a JSON object.")
    unknown = sorted(set(payload) - set(REQUEST_FIELDS))
    if unknown:
        raise ConfigError(f"Unknown request field(s): {', '.join(unknown)}.")

    viewport: Viewport = base.viewport
    resolution: Resolution = base.resolution
    max_iterations = base.max_iterations

    if "bl" in payload:
        viewport = replace(viewport, origin=Complex.from_pair(_pair(payload, "bl", Real)))
    if "dim" in payload:
        width, height = _pair(payload, "dim", Real)
        viewport = replace(viewport, width=float(width), height=float(height))
    if "res" in payload:
        width_px, height_px = _pair(payload, "res", Integral)
        resolution = Resolution(int(width_px), int(height_px))
    if "iters" in payload:
        max_iterations = payload["iters"]

    config = replace(base, viewport=viewport, resolution=resolution, max_iterations=max_iterations)
    return validate_config(config)


def load_request(path: Union[str, Path]) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON ({exc.msg}).") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path}: request body is not valid UTF-8 ({exc.reason}).") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"{path}: request body must be a JSON object.")
    return payload


def handle_generate(
    payload: Mapping[str, Any],
    output_path: Optional[Path] = None,
    base: FractalConfig = DEFAULT_CONFIG,
) -> dict:
    """Render the requested frame to ``output_path`` and report the outcome."""

    output_path = Path(output_path) if output_path is not None else DEFAULT_OUTPUT
    try:
        config = config_from_request(payload, base)
        write_single_image(render_frame(config), output_path)
    except ConfigError as exc:
        return {"success": False, "error": str(exc)}
    except OSError as exc:
        return {"success": False, "error": f"could not write {output_path}: {exc}"}
    return {"success": True, "path": str(output_path)}
