#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import time

from .config import RenderConfig
from .renderer import Renderer
from .scene import Scene

HUD_ROWS = 1


def grid_extent(term_cols, term_rows, config: RenderConfig):
    """Largest grid coordinates (max_x, max_y) visible in a terminal of that size."""
    w = (term_cols - 1) * 2
    h = (term_rows - HUD_ROWS) * 4
    return w // config.draw_factor - 1, h // config.draw_factor - 1


class DemoApp:
    """
    Interactive harness: a new random triangle every frame_delay seconds,
    drawn filled with its outline on top, plus an FPS/status HUD.
    """

    def __init__(self, stdscr, config: RenderConfig, scene: Scene = None):
        self.stdscr = stdscr
        self.running = True
        self.config = config

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        self.renderer = Renderer()
        self.renderer.init_colors(config)

        # A scene with a fixed triangle starts paused on that triangle
        self.scene = scene or Scene()
        if self.scene.triangle:
            config.paused = True
        self.last_update = 0.0

        # ── Frame counter ───────────────────────────────────────────────
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    def new_triangle(self):
        th, tw = self.stdscr.getmaxyx()
        max_x, max_y = grid_extent(tw, th, self.config)
        if max_x < 0 or max_y < 0:
            return
        self.scene.randomize(max_x, max_y)

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        config = self.config

        if key == ord('q'):
            self.running = False
        elif key == ord(' '):
            config.paused = not config.paused
        elif key == ord('n'):
            self.new_triangle()
        elif key == ord('r'):
            # Back to random triangles, a fresh one on the next update
            self.scene.clear()
            config.paused = False
        elif key == ord('o'):
            config.draw_outline = not config.draw_outline
        elif key == ord('g'):
            config.draw_grid = not config.draw_grid
        elif key in (ord('='), ord('+')):
            config.set_draw_factor(config.draw_factor + 1)
        elif key == ord('-'):
            config.set_draw_factor(config.draw_factor - 1)
        elif key == ord('c'):
            config.use_color = not config.use_color
        elif key == ord('b'):
            config.use_braille = not config.use_braille

    def update(self, now):
        if self.config.paused:
            return
        if not self.scene.triangle or now - self.last_update >= self.config.frame_delay:
            self.new_triangle()
            self.last_update = now

    def hud(self, start_time, now):
        config = self.config
        pts = ' '.join(f"({x},{y})" for x, y in self.scene.triangle)
        modestr = (f"{'COL' if config.use_color else 'MON'} "
                   f"{'BRA' if config.use_braille else 'ASC'} "
                   f"{'GRID' if config.draw_grid else '----'} "
                   f"{'OUT' if config.draw_outline else '---'}")
        return (f" FPS:{self.fps}"
                f" | {(now - start_time) * 1000:.1f}ms"
                f" | x{config.draw_factor}"
                f" | {pts} {self.scene.color}"
                f" | [{modestr}]"
                f"{' | PAUSED' if config.paused else ''} ")

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self):
        while self.running:
            start_time = time.time()

            self.handle_input()
            self.update(start_time)

            # Render frame (fills canvas → outputs to stdscr, does NOT refresh)
            self.renderer.draw(self.stdscr, self.scene, self.config, top=HUD_ROWS)

            th, tw = self.stdscr.getmaxyx()

            self.frame_count += 1
            now = time.time()
            if now - self.last_fps_time >= 1.0:
                self.fps = self.frame_count
                self.frame_count = 0
                self.last_fps_time = now

            try:
                self.stdscr.addstr(
                    0, 0,
                    self.hud(start_time, now).center(tw - 1, '=')[:max(0, tw - 1)],
                    curses.color_pair(0) | curses.A_BOLD)
            except curses.error:
                pass

            self.stdscr.refresh()
            # Keep the loop from spinning a full core
            time.sleep(0.01)


def main(stdscr, config: RenderConfig, scene: Scene = None):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config, scene)
    app.run()
