import pytest

from sparse_life.config import STATS_PANEL_MIN_HEIGHT, STATS_PANEL_WIDTH, LifeConfig
from sparse_life.errors import ConfigurationError, LifeError


def test_defaults_are_valid():
    config = LifeConfig()
    assert config.validate() is config
    assert config.grid_width == 30
    assert config.grid_height == 30
    assert config.prompt == "> "


@pytest.mark.parametrize(
    "field,value",
    [
        ("grid_width", 0),
        ("grid_height", -3),
        ("cell_size", 1),
        ("fps", 0),
        ("fps", 120),
        ("anim_delay", -0.5),
        ("density", 1.5),
        ("glyph_columns", 0),
    ],
)
def test_invalid_values(field, value):
    config = LifeConfig(**{field: value})
    with pytest.raises(ConfigurationError) as excinfo:
        config.validate()
    assert excinfo.value.config_key == field
    assert field in str(excinfo.value)


def test_configuration_error_is_life_error():
    error = ConfigurationError("bad value")
    assert isinstance(error, LifeError)
    assert error.config_key == "configuration"
    assert error.details == {}


def test_window_geometry():
    config = LifeConfig(grid_width=40, grid_height=30, cell_size=10)
    assert config.grid_pixel_width == 400
    assert config.grid_pixel_height == 300
    assert config.window_width == 400 + STATS_PANEL_WIDTH
    assert config.window_height == max(300, STATS_PANEL_MIN_HEIGHT)

    config.show_stats = False
    assert config.window_width == 400
    assert config.window_height == 300
