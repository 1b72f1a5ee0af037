from triangle_cli_rasterizer.canvas import Canvas, render_cell_ascii, render_cell_braille
from triangle_cli_rasterizer.triangle import draw_triangle_filled


def test_for_terminal_extents():
    canv = Canvas.for_terminal(3, 2, draw_factor=2)
    assert (canv.w, canv.h) == (6, 8)
    assert (canv.cols, canv.rows) == (3, 4)
    assert len(canv.grid) == 2 and len(canv.grid[0]) == 3


def test_plot_single_dot():
    canv = Canvas.for_terminal(3, 2)
    canv.plot(0, 0, "#FF0000")
    assert canv.grid[0][0] == 1
    assert canv.c_grid[0][0] == "#FF0000"
    assert canv.to_lines()[0] == chr(0x2801)


def test_plot_fills_draw_factor_block():
    canv = Canvas.for_terminal(3, 2, draw_factor=2)
    canv.plot(0, 0)
    assert canv.grid[0][0] == 0x33
    assert canv.to_lines()[0] == chr(0x281B)
    assert canv.to_lines(use_braille=False)[0] == "="


def test_grid_gap_leaves_last_dot_row_and_column_blank():
    canv = Canvas.for_terminal(3, 2, draw_factor=2, draw_grid=True)
    canv.plot(0, 0)
    assert canv.grid[0][0] == 1


def test_plot_outside_is_ignored():
    canv = Canvas.for_terminal(2, 1)
    canv.plot(-1, 0)
    canv.plot(10, 10)
    assert list(canv.cells()) == []
    assert canv.to_lines() == [""]


def test_last_write_wins_cell_color():
    canv = Canvas.for_terminal(2, 1)
    canv.sink("#111111")(0, 0)
    canv.sink("#222222")(1, 1)
    assert list(canv.cells()) == [(0, 0, canv.grid[0][0], "#222222")]


def test_sink_passes_colors_through():
    canv = Canvas.for_terminal(2, 1)
    sink = canv.sink()
    sink(0, 0, "#ABCDEF")
    assert canv.c_grid[0][0] == "#ABCDEF"


def test_filled_triangle_on_canvas():
    canv = Canvas.for_terminal(5, 2)
    draw_triangle_filled([(0, 0), (9, 0), (0, 7)], canv.sink("#00FF00"))
    lines = canv.to_lines(use_braille=False)
    assert lines == ["%%%*-", "#=."]
    assert all(color == "#00FF00" for _, _, _, color in canv.cells())


def test_render_cell_helpers():
    assert render_cell_ascii(0) == " "
    assert render_cell_ascii(0xFF) == "%"
    assert render_cell_ascii(0x01) == "."
    assert render_cell_braille(0) == " "
    assert render_cell_braille(0xFF) == chr(0x28FF)
