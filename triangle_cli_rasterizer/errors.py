#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class RasterError(ValueError):
    """Base class for input errors raised by the rasterizer core."""


class InvalidColor(RasterError):
    """Malformed hex color string or non-numeric RGB channel."""


class InvalidGeometry(RasterError):
    """Triangle without exactly 3 points, or a non-integral coordinate."""
