import numpy as np

from screen_placer.models import ActiveOutput, Bounds
from screen_placer.overlap import nearest_output, overlap_extents, resolve_overlap

A_SIZE = (100, 50)


def _outputs():
    return [
        ActiveOutput(1, "A", Bounds(0, 0, 100, 50)),
        ActiveOutput(2, "B", Bounds(120, 0, 100, 50)),
    ]


def test_overlap_extents_sign():
    assert list(overlap_extents((30, 0), A_SIZE, (120, 0), (100, 50))) == [10, 50]
    assert list(overlap_extents((0, 0), A_SIZE, (120, 0), (100, 50))) == [-20, 50]


def test_dragged_output_snaps_to_neighbor_edge():
    assert resolve_overlap((30, 0), A_SIZE, _outputs(), dragged_id=1) == (20, 0)


def test_gap_is_closed():
    assert resolve_overlap((0, 0), A_SIZE, _outputs(), dragged_id=1) == (20, 0)


def test_small_nudge_away_converges_to_touching():
    origin = resolve_overlap((17, 0), A_SIZE, _outputs(), dragged_id=1)
    assert origin == (20, 0)
    assert resolve_overlap(origin, A_SIZE, _outputs(), dragged_id=1) == origin


def test_diagonal_separation_is_untouched():
    origin = (-150, -100)
    overlap = overlap_extents(origin, A_SIZE, (120, 0), (100, 50))
    assert np.all(overlap < 0)
    assert resolve_overlap(origin, A_SIZE, _outputs(), dragged_id=1) == origin


def test_vertical_snap_when_y_is_the_tighter_axis():
    outputs = [
        ActiveOutput(1, "A", Bounds(0, 0, 100, 50)),
        ActiveOutput(2, "B", Bounds(0, 60, 100, 50)),
    ]
    assert resolve_overlap((0, 5), A_SIZE, outputs, dragged_id=1) == (0, 10)


def test_output_below_neighbor_is_pushed_down():
    outputs = [
        ActiveOutput(1, "A", Bounds(0, 0, 100, 50)),
        ActiveOutput(2, "B", Bounds(0, 60, 100, 50)),
    ]
    assert resolve_overlap((0, 90), A_SIZE, outputs, dragged_id=2) == (0, 50)


def test_equal_distance_goes_to_later_output():
    outputs = [
        ActiveOutput(2, "B", Bounds(200, 0, 100, 50)),
        ActiveOutput(3, "C", Bounds(-200, 0, 100, 50)),
    ]
    assert nearest_output((0, 0), A_SIZE, outputs, exclude_id=1).name == "C"


def test_lone_output_moves_freely():
    outputs = [ActiveOutput(1, "A", Bounds(0, 0, 100, 50))]
    assert resolve_overlap((333, -7), A_SIZE, outputs, dragged_id=1) == (333, -7)
