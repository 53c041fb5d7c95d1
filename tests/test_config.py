import math
from dataclasses import replace

import pytest

from fractus.coloring import DEFAULT_PCL, FLAT_ESCAPE, ColormapLoop
from fractus.complexmath import Complex
from fractus.config import DEFAULT_CONFIG, ConfigError, color_strategy, iterate_map, validate_config
from fractus.engine import IterateMap
from fractus.mapping import Resolution, Viewport


def test_defaults():
    assert DEFAULT_CONFIG.viewport == Viewport(Complex(-3.0, -1.0), 4.0, 2.0)
    assert DEFAULT_CONFIG.resolution == Resolution(1400, 700)
    assert DEFAULT_CONFIG.max_iterations == 1000
    assert DEFAULT_CONFIG.iterate is IterateMap.QUADRATIC
    assert DEFAULT_CONFIG.color_of is DEFAULT_PCL
    assert validate_config(DEFAULT_CONFIG) is DEFAULT_CONFIG


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)


@pytest.mark.parametrize(
    "viewport",
    [
        Viewport(Complex(-3.0, -1.0), 0.0, 2.0),
        Viewport(Complex(-3.0, -1.0), 4.0, -2.0),
        Viewport(Complex(-3.0, -1.0), math.inf, 2.0),
        Viewport(Complex(math.nan, -1.0), 4.0, 2.0),
        Viewport(Complex(-3.0, math.inf), 4.0, 2.0),
    ],
)
def test_bad_viewports(viewport):
    with pytest.raises(ConfigError):
        validate_config(replace(DEFAULT_CONFIG, viewport=viewport))


@pytest.mark.parametrize("resolution", [Resolution(0, 10), Resolution(10, -1), Resolution(10.5, 10)])
def test_bad_resolutions(resolution):
    with pytest.raises(ConfigError):
        validate_config(replace(DEFAULT_CONFIG, resolution=resolution))


@pytest.mark.parametrize("max_iterations", [0, -5, 10.0, True, None])
def test_bad_iteration_budgets(max_iterations):
    with pytest.raises(ConfigError):
        validate_config(replace(DEFAULT_CONFIG, max_iterations=max_iterations))


def test_non_callable_strategies():
    with pytest.raises(ConfigError):
        validate_config(replace(DEFAULT_CONFIG, iterate="z^2 + c"))
    with pytest.raises(ConfigError):
        validate_config(replace(DEFAULT_CONFIG, color_of=(0, 0, 0, 255)))


def test_iterate_map_names():
    assert iterate_map("quadratic") is IterateMap.QUADRATIC
    assert iterate_map("Cubic") is IterateMap.CUBIC
    with pytest.raises(ConfigError):
        iterate_map("quartic")


def test_color_strategy_names():
    assert color_strategy("flat") is FLAT_ESCAPE
    assert color_strategy("PCL") is DEFAULT_PCL
    assert color_strategy("colormap", colormap="magma", cycle=16) == ColormapLoop("magma", 16.0)


def test_color_strategy_errors():
    with pytest.raises(ConfigError):
        color_strategy("rainbow")
    with pytest.raises(ConfigError):
        color_strategy("colormap", colormap="no-such-map")
    with pytest.raises(ConfigError):
        color_strategy("colormap", cycle=0)
