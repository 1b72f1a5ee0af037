import random

import pytest

from triangle_cli_rasterizer.color import (
    rgb_to_hex, hex_to_rgb, lerp, lerp_color, parse_hex_color, random_color,
    rgb_to_xterm256, rgb_to_ansi8, ColorPalette,
)
from triangle_cli_rasterizer.errors import InvalidColor, RasterError


def test_rgb_to_hex_red():
    assert rgb_to_hex(255, 0, 0) == "#FF0000"


def test_rgb_to_hex_uppercase_and_padding():
    assert rgb_to_hex(10, 171, 205) == "#0AABCD"


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex(300, -20, 127.6) == "#FF0080"
    assert rgb_to_hex(0.4, 254.4, 255.49) == "#00FEFF"


def test_rgb_to_hex_rounds_halves_up():
    assert rgb_to_hex(126.5, 0, 0) == "#7F0000"
    assert rgb_to_hex(0.5, 2.5, 254.5) == "#0103FF"


@pytest.mark.parametrize("bad", ["10", None, [1], True, float("nan")])
def test_rgb_to_hex_rejects_non_numeric(bad):
    with pytest.raises(InvalidColor):
        rgb_to_hex(bad, 0, 0)


def test_hex_to_rgb_six_digits():
    assert hex_to_rgb("#D0DD14") == (208, 221, 20)
    assert hex_to_rgb("d0dd14") == (208, 221, 20)


def test_hex_to_rgb_three_digits_doubles_channels():
    assert hex_to_rgb("#c33") == (204, 51, 51)
    assert hex_to_rgb("FFF") == (255, 255, 255)


@pytest.mark.parametrize("bad", ["", "#", "#12", "#1234", "#12345G", "#GGG", "#1234567", 123, None])
def test_hex_to_rgb_rejects_malformed(bad):
    with pytest.raises(InvalidColor):
        hex_to_rgb(bad)


def test_invalid_color_is_value_error():
    assert issubclass(InvalidColor, RasterError)
    assert issubclass(InvalidColor, ValueError)


def test_rgb_round_trip_exact():
    rng = random.Random(7)
    samples = [(0, 0, 0), (255, 255, 255), (1, 128, 254)]
    samples += [tuple(rng.randint(0, 255) for _ in range(3)) for _ in range(200)]
    for rgb in samples:
        assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb


def test_lerp_does_not_clamp_t():
    assert lerp(0, 10, 0.5) == 5
    assert lerp(0, 10, 2) == 20
    assert lerp(0, 10, -1) == -10


def test_lerp_color_endpoints_and_midpoint():
    assert lerp_color("#000000", "#FFFFFF", 0) == "#000000"
    assert lerp_color("#000000", "#FFFFFF", 1) == "#FFFFFF"
    assert lerp_color("#000000", "#C8643C", 0.5) == "#64321E"
    assert lerp_color("#000000", "#FDFDFD", 0.5) == "#7F7F7F"


def test_lerp_color_extrapolation_clamps_channels():
    assert lerp_color("#808080", "#FF0000", 3) == "#FF0000"
    assert lerp_color("#808080", "#FF0000", -3) == "#00FFFF"


@pytest.mark.parametrize("t", [-1e17, -5, -0.5, 0, 0.25, 1, 7.5, 1e17])
def test_lerp_color_same_color_is_identity(t):
    assert lerp_color("#3C7A11", "#3C7A11", t) == "#3C7A11"


def test_lerp_color_huge_t_keeps_shared_channels():
    assert lerp_color("#C8C8C8", "#C8C8C8", 1e17) == "#C8C8C8"
    assert lerp_color("#C80000", "#C800FF", 1e17) == "#C800FF"
    assert lerp_color("#C80000", "#C800FF", -1e17) == "#C80000"


def test_lerp_color_accepts_short_form():
    assert lerp_color("#c33", "#c33", 0.3) == "#CC3333"


def test_parse_hex_color_is_lenient():
    assert parse_hex_color("#0E0E2C") == (14, 14, 44)
    assert parse_hex_color("nope") is None
    assert parse_hex_color(None) is None


def test_random_color_is_canonical_and_seeded():
    a = random_color(random.Random(3))
    b = random_color(random.Random(3))
    assert a == b
    assert a.startswith("#") and len(a) == 7 and a == a.upper()
    hex_to_rgb(a)


def test_terminal_palette_matching():
    assert rgb_to_xterm256(255, 0, 0) == 196
    assert rgb_to_xterm256(0, 0, 0) == 16
    assert 232 <= rgb_to_xterm256(128, 128, 128) <= 255
    assert rgb_to_ansi8(250, 10, 10) == 1
    assert rgb_to_ansi8(200, 200, 200) == 7


def test_palette_without_color_uses_default_pair():
    palette = ColorPalette().setup(use_color=False)
    assert palette.mode == "mono"
    assert palette.pair_for("#FF0000") == 0
    assert palette.pair_for(None) == 0


def test_rgb_to_hex_rejects_infinity():
    with pytest.raises(InvalidColor):
        rgb_to_hex(float("inf"), 0, 0)
