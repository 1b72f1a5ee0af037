from triangle_cli_rasterizer.config import RenderConfig
from triangle_cli_rasterizer.renderer import Renderer
from triangle_cli_rasterizer.scene import Scene


def _colors(canv):
    return {color for _, _, _, color in canv.cells()}


def test_render_frame_fill_and_outline():
    scene = Scene(triangle=[(0, 0), (8, 0), (4, 4)], fill_color="#FF0000")
    config = RenderConfig(draw_factor=1, outline_color="#00FF00")
    canv = Renderer().render_frame(scene, config, 10, 3)
    assert list(canv.cells())
    # Outline is drawn last and covers the triangle's edge cells
    assert "#00FF00" in _colors(canv)


def test_render_frame_without_outline_uses_fill_color():
    scene = Scene(triangle=[(0, 0), (8, 0), (4, 4)], fill_color="#FF0000")
    config = RenderConfig(draw_factor=1, draw_outline=False)
    canv = Renderer().render_frame(scene, config, 10, 3)
    assert _colors(canv) == {"#FF0000"}


def test_render_frame_empty_scene():
    canv = Renderer().render_frame(Scene(), RenderConfig(), 4, 2)
    assert list(canv.cells()) == []


def test_render_frame_degenerate_triangle_draws_nothing():
    scene = Scene(triangle=[(0, 2), (3, 2), (6, 2)])
    canv = Renderer().render_frame(scene, RenderConfig(draw_factor=1), 4, 2)
    assert list(canv.cells()) == []


def test_render_frame_respects_draw_factor():
    scene = Scene(triangle=[(0, 0), (1, 0), (0, 1)], fill_color="#FFFFFF")
    config = RenderConfig(draw_factor=4, draw_grid=False, draw_outline=False)
    canv = Renderer().render_frame(scene, config, 4, 2)
    # 3 grid cells of 4x4 dots
    dots = sum(bin(mask).count("1") for _, _, mask, _ in canv.cells())
    assert dots == 48
