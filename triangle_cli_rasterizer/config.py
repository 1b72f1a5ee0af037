#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass

from .color import hex_to_rgb, rgb_to_hex

MIN_DRAW_FACTOR = 1
MAX_DRAW_FACTOR = 8


@dataclass
class RenderConfig:
    """
    Presentation settings for the render loop.
    Passed to the renderer on every frame; the rasterizer never reads it.
    """
    draw_factor: int = 2
    draw_outline: bool = True
    draw_grid: bool = True
    paused: bool = False
    use_color: bool = True
    use_braille: bool = True
    outline_color: str = '#EEEEEE'
    frame_delay: float = 1.0
    log_level: str = 'WARNING'

    def __post_init__(self):
        self.set_draw_factor(self.draw_factor)
        # Normalize to '#RRGGBB'; raises InvalidColor on bad input
        self.outline_color = rgb_to_hex(*hex_to_rgb(self.outline_color))
        self.frame_delay = max(0.0, float(self.frame_delay))
        self.log_level = str(self.log_level).upper()

    def set_draw_factor(self, factor: int):
        """Clamp the draw factor; a factor of 1 leaves no room for grid gaps."""
        self.draw_factor = max(MIN_DRAW_FACTOR, min(MAX_DRAW_FACTOR, int(factor)))
        if self.draw_factor == 1:
            self.draw_grid = False

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        settings = dict(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
        settings.update(overrides)
        return cls(**settings)
