"""Tests for frame buffer rendering."""

import jax.numpy as jnp
import pytest
from chip8.rendering import frame_buffer_to_rgb, create_color_scheme


def test_frame_buffer_to_rgb_layout():
    frame_buffer = jnp.zeros(64 * 32, dtype=jnp.uint8).at[1 * 64 + 3].set(1)

    rgb = frame_buffer_to_rgb(frame_buffer, scale=1, on_color=(1, 2, 3), off_color=(9, 9, 9))

    assert rgb.shape == (32, 64, 3)
    assert tuple(rgb[1, 3]) == (1, 2, 3)
    assert tuple(rgb[3, 1]) == (9, 9, 9)


def test_frame_buffer_to_rgb_scaling():
    frame_buffer = jnp.zeros(64 * 32, dtype=jnp.uint8).at[0].set(1)

    rgb = frame_buffer_to_rgb(frame_buffer, scale=4)

    assert rgb.shape == (128, 256, 3)
    assert (rgb[:4, :4] == (0, 255, 0)).all()
    assert (rgb[4:8, :4] == 0).all()


def test_color_schemes():
    on_color, off_color = create_color_scheme("paper")

    assert on_color == (0, 0, 0)
    assert off_color == (255, 255, 255)

    with pytest.raises(ValueError):
        create_color_scheme("nope")
