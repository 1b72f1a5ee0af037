#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .errors import RasterError, InvalidColor, InvalidGeometry
from .geometry import Point
from .color import rgb_to_hex, hex_to_rgb, lerp, lerp_color, parse_hex_color
from .line import (draw_line, draw_horizontal_line, draw_vertical_line,
                   make_color_lerp_sink, draw_gradient_line)
from .triangle import (sort_points, draw_triangle_outline, draw_triangle_filled,
                       triangle_spans)
from .config import RenderConfig
from .canvas import Canvas
from .scene import Scene
from .renderer import Renderer
