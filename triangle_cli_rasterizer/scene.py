#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import random

from .color import random_color, rgb_to_hex, hex_to_rgb
from .geometry import as_triangle

log = logging.getLogger(__name__)


class Scene:
    """
    The triangle currently on screen and its fill color.

    randomize() replaces both, the way the render loop picks a new
    triangle each frame; a fixed fill_color survives randomize().
    Pass a seeded random.Random for repeatable frames.
    """

    def __init__(self, triangle=None, fill_color=None, rng=None):
        self.rng = rng or random.Random()
        self.fill_color = rgb_to_hex(*hex_to_rgb(fill_color)) if fill_color else None
        self.color = self.fill_color or '#FFFFFF'
        self.triangle = []
        if triangle is not None:
            self.set_triangle(triangle)

    def set_triangle(self, triangle):
        """Validate and store a triangle."""
        self.triangle = as_triangle(triangle)

    def random_point(self, max_x, max_y):
        return (self.rng.randint(0, max(0, max_x)), self.rng.randint(0, max(0, max_y)))

    def randomize(self, max_x, max_y):
        """Pick 3 random points in [0, max_x] x [0, max_y] and a color."""
        self.triangle = as_triangle([self.random_point(max_x, max_y) for _ in range(3)])
        self.color = self.fill_color or random_color(self.rng)
        log.debug("new triangle %s color %s", self.triangle, self.color)
        return self.triangle

    def clear(self):
        """Drop the current triangle; the render loop draws nothing until the next one."""
        self.triangle = []
