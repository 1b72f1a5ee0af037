#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class Canvas:
    """
    Terminal pixel sink.

    Dots (w x h) are packed into 2x4 character cells. A rasterizer grid
    cell covers draw_factor x draw_factor dots; with draw_grid on and a
    factor above 1 the last dot row and column are left blank so the cell
    boundaries stay visible. The most recent write decides a character
    cell's color.
    """
    __slots__ = ['w', 'h', 'draw_factor', 'draw_grid', 'grid', 'c_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h, draw_factor=1, draw_grid=False):
        self.w, self.h = w, h
        self.draw_factor = max(1, int(draw_factor))
        self.draw_grid = draw_grid
        # 8-bit dot masks per character cell
        self.grid = [[0] * ((w + 1) // 2) for _ in range((h + 3) // 4)]
        # Hex color per character cell, None where nothing was drawn
        self.c_grid = [[None] * ((w + 1) // 2) for _ in range((h + 3) // 4)]

    @classmethod
    def for_terminal(cls, cols, rows, draw_factor=1, draw_grid=False):
        """Canvas covering cols x rows character cells."""
        return cls(cols * 2, rows * 4, draw_factor, draw_grid)

    @property
    def cols(self):
        """Grid cells that fit horizontally."""
        return self.w // self.draw_factor

    @property
    def rows(self):
        """Grid cells that fit vertically."""
        return self.h // self.draw_factor

    def set_dot(self, x, y, color=None):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        cx, cy = x >> 1, y >> 2
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        self.c_grid[cy][cx] = color

    def plot(self, x, y, color=None):
        """Fill the dot block of grid cell (x, y)."""
        f = self.draw_factor
        size = f - 1 if self.draw_grid and f > 1 else f
        x0, y0 = x * f, y * f
        for dy in range(size):
            for dx in range(size):
                self.set_dot(x0 + dx, y0 + dy, color)

    def sink(self, color=None):
        """
        Pixel sink for the rasterizer.
        With a color, returns draw_point(x, y) that plots in that color;
        without one, returns draw_point(x, y, color=None).
        """
        if color is None:
            return self.plot

        def draw_point(x, y):
            self.plot(x, y, color)
        return draw_point

    def cells(self):
        """Yield (row, col, mask, color) for every non-empty character cell."""
        for cy, row in enumerate(self.grid):
            row_color = self.c_grid[cy]
            for cx, mask in enumerate(row):
                if mask:
                    yield cy, cx, mask, row_color[cx]

    def to_lines(self, use_braille=True):
        """Render the canvas as text, one string per character row."""
        render = render_cell_braille if use_braille else render_cell_ascii
        return [''.join(render(mask) for mask in row).rstrip() for row in self.grid]


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
