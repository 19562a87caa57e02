import pytest

from tile_canvas.config import DEFAULT_RENDER_CONFIG, RenderConfig


def test_defaults() -> None:
    assert DEFAULT_RENDER_CONFIG.tile_width == 16
    assert DEFAULT_RENDER_CONFIG.tile_height == 16
    assert DEFAULT_RENDER_CONFIG.low_priority_max_opacity == 0xFF
    assert DEFAULT_RENDER_CONFIG.high_priority_max_opacity == 0xFF
    assert DEFAULT_RENDER_CONFIG.projection == "isometric"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tile_width": 0},
        {"tile_height": -16},
        {"low_priority_max_opacity": 256},
        {"high_priority_max_opacity": -1},
        {"tile_height": 15},
    ],
)
def test_invalid_values(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        RenderConfig(**kwargs)
