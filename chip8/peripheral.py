"""pygame window and keyboard adapter for the CHIP-8 processor."""

from typing import Callable

import jax.numpy as jnp
import pygame

from chip8.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from chip8.rendering import frame_buffer_to_rgb, create_color_scheme

# COSMAC VIP hex keypad laid over the left side of a QWERTY keyboard
KEY_MAP = {
    pygame.K_1: 0x1, pygame.K_2: 0x2, pygame.K_3: 0x3, pygame.K_4: 0xC,
    pygame.K_q: 0x4, pygame.K_w: 0x5, pygame.K_e: 0x6, pygame.K_r: 0xD,
    pygame.K_a: 0x7, pygame.K_s: 0x8, pygame.K_d: 0x9, pygame.K_f: 0xE,
    pygame.K_z: 0xA, pygame.K_x: 0x0, pygame.K_c: 0xB, pygame.K_v: 0xF,
}


class Peripheral:
    """Renders the frame buffer and forwards keypad transitions."""

    def __init__(
        self,
        frame_buffer: Callable[[], jnp.ndarray],
        keydown: Callable[[int], None],
        keyup: Callable[[int], None],
        scale: int = 8,
        color_scheme: str = "classic",
        title: str = "chip8",
    ):
        """Open the window.

        Args:
            frame_buffer: Returns the current flat frame buffer
            keydown: Called with the hex key on a press
            keyup: Called with the hex key on a release
            scale: Window pixels per CHIP-8 pixel
            color_scheme: Name understood by ``create_color_scheme``
            title: Window caption
        """
        pygame.init()
        self.frame_buffer = frame_buffer
        self.keydown = keydown
        self.keyup = keyup
        self.scale = scale
        self.on_color, self.off_color = create_color_scheme(color_scheme)
        self.screen = pygame.display.set_mode((SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale))
        pygame.display.set_caption(title)

    def draw(self) -> None:
        """Blit the current frame buffer to the window."""
        rgb = frame_buffer_to_rgb(self.frame_buffer(), self.scale, self.on_color, self.off_color)
        # surfarray expects (width, height, 3)
        pygame.surfarray.blit_array(self.screen, rgb.transpose(1, 0, 2))
        pygame.display.flip()

    def update(self) -> bool:
        """Poll window events.

        Returns:
            False once the window is closed or Escape is pressed
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key in KEY_MAP:
                    self.keydown(KEY_MAP[event.key])
            elif event.type == pygame.KEYUP and event.key in KEY_MAP:
                self.keyup(KEY_MAP[event.key])
        return True

    def close(self) -> None:
        pygame.quit()
