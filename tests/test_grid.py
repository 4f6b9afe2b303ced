import pytest

from mazewidget.grid import SIDES, create_grid

def test_fresh_grid_is_closed_and_unvisited():
    g = create_grid(4, 3)
    assert (g.cols, g.rows) == (4, 3)
    assert len(g.cells) == 3 and all(len(r) == 4 for r in g.cells)
    for row in g.cells:
        for c in row:
            assert not c.visited
            assert all(c.walls[s] for s in SIDES)
    assert g.open_adjacencies() == 0
    assert g.reachable_from(0, 0) == {(0, 0)}

def test_cells_do_not_share_wall_dicts():
    g = create_grid(2, 1)
    g.cells[0][0].walls["top"] = False
    assert g.cells[0][1].walls["top"] is True

def test_remove_wall_between_clears_both_copies():
    g = create_grid(3, 3)
    assert g.remove_wall_between(1, 1, "right") == (2, 1)
    assert g.cells[1][1].walls["right"] is False
    assert g.cells[1][2].walls["left"] is False
    assert g.remove_wall_between(1, 1, "top") == (1, 0)
    assert g.cells[0][1].walls["bottom"] is False
    assert g.open_adjacencies() == 2
    assert g.reachable_from(1, 1) == {(1, 1), (2, 1), (1, 0)}

def test_out_of_range_addressing_raises():
    g = create_grid(2, 2)
    with pytest.raises(IndexError):
        g.cell(2, 0)
    with pytest.raises(IndexError):
        g.cell(-1, 0)
    with pytest.raises(IndexError):
        g.remove_wall_between(1, 0, "right")

def test_unknown_side_raises():
    g = create_grid(2, 2)
    with pytest.raises(KeyError):
        g.open_wall(0, 0, "middle")

@pytest.mark.parametrize("cols,rows", [(0, 3), (3, 0), (-1, 2), (2.5, 2), (True, 2)])
def test_bad_sizes_rejected(cols, rows):
    with pytest.raises(ValueError):
        create_grid(cols, rows)

def test_mask_matrix_bits():
    g = create_grid(2, 1)
    g.remove_wall_between(0, 0, "right")
    # top=1 right=2 bottom=4 left=8
    assert g.as_mask_matrix() == [[1 | 4 | 8, 1 | 2 | 4]]
