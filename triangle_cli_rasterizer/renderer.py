#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging

from .canvas import Canvas, render_cell_ascii, render_cell_braille
from .color import ColorPalette
from .config import RenderConfig
from .scene import Scene
from .triangle import draw_triangle_filled, draw_triangle_outline

log = logging.getLogger(__name__)


class Renderer:
    """
    Draws a Scene into a Canvas and outputs it to curses.

    render_frame() is independent of curses and returns the filled canvas;
    draw() renders one frame into a curses window.
    """

    def __init__(self):
        self.palette = ColorPalette()

    def init_colors(self, config: RenderConfig):
        """Set up curses color pairs.  Call once after curses.wrapper init."""
        self.palette.setup(config.use_color)

    def render_frame(self, scene: Scene, config: RenderConfig, cols: int, rows: int) -> Canvas:
        """
        Rasterize the scene onto a canvas of cols x rows character cells.

        Pipeline:
          1. Filled triangle in the scene color
          2. Outline on top in config.outline_color (when enabled)
        """
        canv = Canvas.for_terminal(cols, rows, config.draw_factor, config.draw_grid)
        if not scene.triangle:
            return canv

        draw_triangle_filled(scene.triangle, canv.sink(scene.color))
        if config.draw_outline:
            draw_triangle_outline(scene.triangle, canv.sink(config.outline_color))
        return canv

    def draw(self, stdscr, scene: Scene, config: RenderConfig, top=1):
        """
        Render one frame to the curses screen below `top` header rows.

        Does NOT call stdscr.refresh() - the caller should do that after
        optional HUD / overlay drawing.
        """
        th, tw = stdscr.getmaxyx()
        cols, rows = tw - 1, th - top
        stdscr.erase()
        if cols <= 0 or rows <= 0:
            log.debug("terminal too small to draw: %dx%d", tw, th)
            return None

        canv = self.render_frame(scene, config, cols, rows)
        render = render_cell_braille if config.use_braille else render_cell_ascii

        for cy, cx, mask, color in canv.cells():
            if cy >= rows or cx >= cols:
                continue
            attr = curses.color_pair(self.palette.pair_for(color) if config.use_color else 0)
            try:
                stdscr.addstr(cy + top, cx, render(mask), attr)
            except curses.error:
                # Writing the bottom-right cell moves the cursor off screen
                pass
        return canv
