import pytest

from lightsout.components.layout import LayoutInfo
from lightsout.ui.layout import (
    cell_to_rect,
    compute_layout,
    compute_scale,
    point_in_table,
    point_to_cell,
    resolve_cell,
)


def test_design_resolution_layout():
    layout = compute_layout(80, 24, 5)
    assert compute_scale(80, 24) == (1.0, 1.0)
    assert layout.table_x == pytest.approx(18.0)
    assert layout.table_y == pytest.approx(1.0)
    assert layout.table_width == pytest.approx(42.0)
    assert layout.table_height == pytest.approx(21.0)
    assert layout.block_width == pytest.approx(8.4)
    assert layout.block_height == pytest.approx(3.7)


def test_scaled_layout():
    layout = compute_layout(120, 40, 5)
    assert layout.table_x == pytest.approx(27.0)
    assert layout.table_y == pytest.approx(40 / 24)
    assert layout.table_width == pytest.approx(63.0)
    assert layout.table_height == pytest.approx(35.0)
    assert layout.block_width == pytest.approx(12.6)
    assert layout.block_height == pytest.approx(6.5)


def test_layout_is_immutable():
    layout = compute_layout(80, 24, 5)
    with pytest.raises(AttributeError):
        layout.table_x = 3.0


def test_cell_rects_at_design_resolution():
    layout = compute_layout(80, 24, 5)
    assert cell_to_rect(layout, 0, 0) == (18, 1, 8, 3)
    assert cell_to_rect(layout, 1, 0) == (27, 1, 8, 3)
    assert cell_to_rect(layout, 0, 1) == (18, 5, 8, 3)
    assert cell_to_rect(layout, 4, 4) == (54, 17, 8, 3)


@pytest.mark.parametrize("width,height", [(80, 24), (120, 40), (40, 12)])
@pytest.mark.parametrize("size", [3, 5])
def test_rect_corner_maps_back_to_cell(width, height, size):
    layout = compute_layout(width, height, size)
    for row in range(size):
        for col in range(size):
            x, y, _, _ = cell_to_rect(layout, row, col)
            assert resolve_cell(layout, x + 1, y + 1, size) == (row, col)


def test_table_bounds_are_exclusive_left_inclusive_right():
    layout = compute_layout(80, 24, 5)
    assert not point_in_table(layout, 18, 5)
    assert point_in_table(layout, 19, 5)
    assert point_in_table(layout, 60, 22)
    assert not point_in_table(layout, 61, 5)
    assert not point_in_table(layout, 30, 1)
    assert not point_in_table(layout, 30, 23)


def test_point_to_cell_truncates():
    layout = compute_layout(80, 24, 5)
    assert point_to_cell(layout, 19, 2) == (0, 0)
    assert point_to_cell(layout, 26, 4) == (0, 0)
    assert point_to_cell(layout, 27, 5) == (1, 1)


def test_points_past_last_cell_are_rejected_not_clamped():
    layout = compute_layout(80, 24, 5)
    # Inside the table rectangle but below the last row of blocks.
    assert point_in_table(layout, 30, 22)
    assert point_to_cell(layout, 30, 22) == (1, 5)
    assert resolve_cell(layout, 30, 22, 5) is None


def test_points_outside_table_are_rejected():
    layout = compute_layout(80, 24, 5)
    assert resolve_cell(layout, 0, 0, 5) is None
    assert resolve_cell(layout, 79, 10, 5) is None


def test_resolve_cell_with_hand_built_layout():
    layout = LayoutInfo(table_x=0.0, table_y=0.0, table_width=10.0, table_height=10.0,
                        block_width=5.0, block_height=5.0)
    assert resolve_cell(layout, 1, 1, 2) == (0, 0)
    assert resolve_cell(layout, 6, 9, 2) == (1, 1)
    assert resolve_cell(layout, 10, 10, 2) is None
