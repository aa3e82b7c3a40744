import pytest

from maze_slider.grid import DOWN, LEFT, RIGHT, UP
from maze_slider.moves import MoveInstruction, compress_moves, remaining_length, render_label


def _path(*cells):
    return list(zip(cells, cells[1:]))


# 3x3 snake: right along the top, back left through the middle, right along the bottom
S_WALLS = frozenset({((1, 0), (1, 1)), ((0, 0), (0, 1)), ((1, 1), (1, 2)), ((2, 1), (2, 2))})
S_PATH = _path((0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1), (0, 2), (1, 2), (2, 2))

# 3x3 hook: down the left side, up the middle column, down the right side
HOOK_WALLS = frozenset({((0, 0), (1, 0)), ((0, 1), (1, 1)), ((1, 1), (2, 1)), ((1, 2), (2, 2))})
HOOK_PATH = _path((0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0), (2, 0), (2, 1), (2, 2))


def _labels(instructions):
    return [i.label for i in instructions]


def test_labels():
    assert render_label(UP, True) == "⇈ Max up (+1)"
    assert render_label(DOWN, True) == "⇊ Max down (+1)"
    assert render_label(LEFT, True) == "⇇ Max left (+1)"
    assert render_label(RIGHT, True) == "⇉ Max right (+1)"
    assert render_label(UP, False, 3) == "↑ 3 up (+3)"
    assert render_label(DOWN, False, 2) == "↓ 2 down (+2)"
    assert render_label(LEFT, False, 1) == "⇽ 1 left (+1)"
    assert render_label(RIGHT, False, 4) == "⇾ 4 right (+4)"
    assert str(MoveInstruction(RIGHT, 4, False)) == "⇾ 4 right (+4)"


def test_label_rejects_non_direction():
    with pytest.raises(ValueError):
        render_label((1, 1), True)


def test_instruction_cost():
    assert MoveInstruction(LEFT, 1, True).cost == 1
    assert MoveInstruction(LEFT, 5, False).cost == 5


def test_remaining_length_stops_at_edge_and_walls():
    assert remaining_length(5, 1, (0, 0), RIGHT, frozenset()) == 5
    assert remaining_length(5, 1, (4, 0), RIGHT, frozenset()) == 1
    assert remaining_length(5, 1, (0, 0), RIGHT, {((2, 0), (3, 0))}) == 3
    # walls are looked up in either orientation
    assert remaining_length(5, 1, (0, 0), RIGHT, {((3, 0), (2, 0))}) == 3
    assert remaining_length(3, 3, (2, 1), DOWN, S_WALLS) == 1


def test_straight_run_is_one_slide():
    path = _path((0, 0), (1, 0), (2, 0), (3, 0), (4, 0))
    n_moves, instructions = compress_moves(path, frozenset(), 5, 1)
    assert n_moves == 1
    assert instructions == [MoveInstruction(RIGHT, 1, True)]
    assert _labels(instructions) == ["⇉ Max right (+1)"]


def test_straight_column_is_one_slide():
    path = _path((0, 0), (0, 1), (0, 2))
    n_moves, instructions = compress_moves(path, frozenset(), 1, 3)
    assert n_moves == 1
    assert _labels(instructions) == ["⇊ Max down (+1)"]


def test_single_step_into_goal_is_literal():
    n_moves, instructions = compress_moves(_path((0, 0), (1, 0)), frozenset(), 2, 1)
    assert n_moves == 1
    assert _labels(instructions) == ["⇾ 1 right (+1)"]


def test_empty_path():
    assert compress_moves([], frozenset(), 1, 1) == (0, [])


def test_single_turn_at_wall():
    path = _path((0, 0), (1, 0), (2, 0), (2, 1), (2, 2))
    n_moves, instructions = compress_moves(path, frozenset(), 3, 3)
    assert n_moves == 2
    assert _labels(instructions) == ["⇉ Max right (+1)", "⇊ Max down (+1)"]


def test_turn_before_wall_walks_when_cheaper():
    path = _path((0, 0), (1, 0), (1, 1), (2, 1))
    n_moves, instructions = compress_moves(path, frozenset(), 3, 2)
    assert n_moves == 3
    assert _labels(instructions) == ["⇾ 1 right (+1)", "↓ 1 down (+1)", "⇾ 1 right (+1)"]


def test_overshoot_then_walk_back():
    # three cells right then down, with one open cell past the turn
    path = _path((0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (4, 1))
    n_moves, instructions = compress_moves(path, frozenset(), 5, 2)
    assert n_moves == 4
    assert _labels(instructions) == [
        "⇉ Max right (+1)",
        "⇽ 1 left (+1)",
        "↓ 1 down (+1)",
        "⇾ 1 right (+1)",
    ]


def test_s_turn():
    n_moves, instructions = compress_moves(S_PATH, S_WALLS, 3, 3)
    assert n_moves == 5
    assert _labels(instructions) == [
        "⇉ Max right (+1)",
        "↓ 1 down (+1)",
        "⇇ Max left (+1)",
        "↓ 1 down (+1)",
        "⇉ Max right (+1)",
    ]


def test_hook():
    n_moves, instructions = compress_moves(HOOK_PATH, HOOK_WALLS, 3, 3)
    assert n_moves == 5
    assert _labels(instructions) == [
        "⇊ Max down (+1)",
        "⇾ 1 right (+1)",
        "⇈ Max up (+1)",
        "⇾ 1 right (+1)",
        "⇊ Max down (+1)",
    ]


@pytest.mark.parametrize("path,walls,size", [
    (S_PATH, S_WALLS, (3, 3)),
    (HOOK_PATH, HOOK_WALLS, (3, 3)),
    (_path((0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (4, 1)), frozenset(), (5, 2)),
])
def test_move_count_matches_instruction_costs(path, walls, size):
    n_moves, instructions = compress_moves(path, walls, *size)
    assert n_moves == sum(i.cost for i in instructions)
    assert n_moves <= len(path)
