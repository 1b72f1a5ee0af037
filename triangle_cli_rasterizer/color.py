#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging
import math
import random
from numbers import Real

from .errors import InvalidColor

log = logging.getLogger(__name__)

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def _clamp_channel(value) -> int:
    # Halves round up: 126.5 -> 127
    return max(0, min(255, math.floor(value + 0.5)))


def rgb_to_hex(r, g, b) -> str:
    """
    Convert RGB channels to an uppercase '#RRGGBB' string.
    Channels are rounded to the nearest integer and clamped to 0-255.
    Raises InvalidColor if any channel is not a real number.
    """
    for name, value in (('r', r), ('g', g), ('b', b)):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidColor(f"channel {name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidColor(f"channel {name} must be finite, got {value!r}")
    return '#{:02X}{:02X}{:02X}'.format(
        _clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def hex_to_rgb(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RGB', '#RRGGBB', 'RGB' or 'RRGGBB' (case-insensitive).
    Raises InvalidColor on anything else.
    """
    if not isinstance(hex_str, str):
        raise InvalidColor(f"hex color must be a string, got {hex_str!r}")
    val = hex_str.strip()
    if val.startswith('#'):
        val = val[1:]
    if len(val) == 3:
        val = ''.join(ch * 2 for ch in val)
    if len(val) != 6:
        raise InvalidColor(f"hex color must have 3 or 6 digits: {hex_str!r}")
    if not _HEX_DIGITS.issuperset(val):
        raise InvalidColor(f"hex color has non-hex characters: {hex_str!r}")
    return (int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))


def parse_hex_color(hex_str):
    """Lenient variant of hex_to_rgb for optional user input: None on failure."""
    if hex_str is None:
        return None
    try:
        return hex_to_rgb(hex_str)
    except InvalidColor as e:
        log.warning("ignoring color %r: %s", hex_str, e)
        return None


def lerp(v0, v1, t):
    """Linear interpolation; t is not clamped."""
    return (1 - t) * v0 + t * v1


def lerp_rgb(rgb0, rgb1, t) -> str:
    """
    Interpolate two decoded (r, g, b) colors and encode the result.
    A channel equal in both colors keeps its value for any t.
    """
    return rgb_to_hex(*(v0 if v0 == v1 else lerp(v0, v1, t) for v0, v1 in zip(rgb0, rgb1)))


def lerp_color(hex0: str, hex1: str, t) -> str:
    """
    Interpolate two hex colors channel by channel.
    t outside [0, 1] extrapolates; the result is clamped per channel.
    """
    return lerp_rgb(hex_to_rgb(hex0), hex_to_rgb(hex1), t)


def random_color(rng=None) -> str:
    """Random 24-bit color as '#RRGGBB'."""
    rng = rng or random
    value = rng.randrange(0x1000000)
    return rgb_to_hex((value >> 16) & 255, (value >> 8) & 255, value & 255)


# --- terminal palette matching ---

# The 6x6x6 xterm cube occupies indices 16-231, each axis uses these levels.
_CUBE_VALUES = (0, 95, 135, 175, 215, 255)

# ANSI 0-7 approximate RGB values
_ANSI8 = (
    (0, 0, 0),       # black
    (128, 0, 0),     # red
    (0, 128, 0),     # green
    (128, 128, 0),   # yellow
    (0, 0, 128),     # blue
    (128, 0, 128),   # magenta
    (0, 128, 128),   # cyan
    (192, 192, 192), # white
)


def _dist2(a, b):
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2


def rgb_to_xterm256(r, g, b) -> int:
    """Nearest xterm-256 index, searching the color cube and the gray ramp."""
    def nearest_level(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri, gi, bi = nearest_level(r), nearest_level(g), nearest_level(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cube_dist = _dist2((r, g, b), (_CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]))

    # Gray ramp 232-255: 8, 18, ..., 238
    gray_step = max(0, min(23, ((r + g + b) // 3 - 8 + 5) // 10))
    gv = 8 + gray_step * 10
    gray_dist = _dist2((r, g, b), (gv, gv, gv))

    return 232 + gray_step if gray_dist < cube_dist else cube_idx


def rgb_to_ansi8(r, g, b) -> int:
    """Nearest basic ANSI color index (0-7), for 8-color terminals."""
    return min(range(8), key=lambda i: _dist2((r, g, b), _ANSI8[i]))


class ColorPalette:
    """
    Allocates curses color pairs for hex colors on demand.

    Color mode cascade, decided once in setup():
      1. xterm-256 - 256+ colors: nearest xterm-256 index
      2. 8-color   - basic ANSI palette approximation
      3. Mono      - every color maps to pair 0
    Pairs are cached per terminal color index, so at most 256 pairs are ever
    allocated; once the terminal runs out of pairs, new colors use pair 0.
    """

    def __init__(self):
        self.mode = 'mono'
        self.max_pairs = 0
        self.bg = curses.COLOR_BLACK
        self._pairs = {}

    def setup(self, use_color=True):
        self._pairs.clear()
        self.mode = 'mono'
        if not use_color:
            return self
        try:
            if not curses.has_colors():
                return self
            curses.start_color()
            try:
                curses.use_default_colors()
                self.bg = -1
            except curses.error:
                self.bg = curses.COLOR_BLACK
            num_colors = getattr(curses, 'COLORS', 8)
            self.max_pairs = getattr(curses, 'COLOR_PAIRS', 64) - 1
        except curses.error as e:
            log.info("terminal colors unavailable: %s", e)
            return self

        if num_colors >= 256:
            self.mode = 'xterm256'
        elif num_colors >= 8:
            self.mode = 'ansi8'
        log.debug("color mode %s (%d colors, %d pairs)", self.mode, num_colors, self.max_pairs)
        return self

    def terminal_index(self, hex_str) -> int:
        r, g, b = hex_to_rgb(hex_str)
        if self.mode == 'xterm256':
            return rgb_to_xterm256(r, g, b)
        return rgb_to_ansi8(r, g, b)

    def pair_for(self, hex_str) -> int:
        """Curses pair number for a hex color (0 when color is unavailable)."""
        if self.mode == 'mono' or hex_str is None:
            return 0
        idx = self.terminal_index(hex_str)
        pair = self._pairs.get(idx)
        if pair is not None:
            return pair
        if len(self._pairs) >= self.max_pairs:
            return 0
        pair = len(self._pairs) + 1
        try:
            curses.init_pair(pair, idx, self.bg)
        except curses.error:
            pair = 0
        self._pairs[idx] = pair
        return pair
