"""
Turns a unit-step solution path into "perfect run" instructions.

The game surface has a button that slides the player as far as possible in
a direction, stopping at the next wall. One press costs one move however far
the player travels, so a solution is scored by how many presses it takes
rather than by its length in cells.
"""
import collections

from maze_slider.grid import (
    DOWN,
    LEFT,
    RIGHT,
    UP,
    direction_between,
    has_wall_between,
    manhattan,
    out_of_bounds,
    step,
)

# (maximal label, stepwise label template)
LABELS = {
    UP: ("⇈ Max up (+1)", "↑ {amt} up (+{amt})"),
    DOWN: ("⇊ Max down (+1)", "↓ {amt} down (+{amt})"),
    LEFT: ("⇇ Max left (+1)", "⇽ {amt} left (+{amt})"),
    RIGHT: ("⇉ Max right (+1)", "⇾ {amt} right (+{amt})"),
}


class MoveInstruction(collections.namedtuple("MoveInstruction", ["direction", "amount", "maximal"])):
    """
    One button press (maximal) or a run of single steps (stepwise).

    A maximal instruction always costs one move; a stepwise one costs `amount`.
    """
    __slots__ = ()

    @property
    def cost(self):
        return 1 if self.maximal else self.amount

    @property
    def label(self):
        return render_label(self.direction, self.maximal, self.amount)

    def __str__(self):
        return self.label


def render_label(direction, maximal, amount=1):
    try:
        max_label, step_label = LABELS[direction]
    except KeyError:
        raise ValueError(f"not a direction: {direction!r}") from None
    return max_label if maximal else step_label.format(amt=amount)


def opposite(direction):
    return (-direction[0], -direction[1])


def remaining_length(width, height, turn, direction, walls):
    """
    How far the corridor carries on past a turning point.

    Starts at 1 and counts each further open cell in `direction`, stopping
    at a wall or the grid edge. The result is what sliding through `turn` to
    the wall and stepping back to `turn` costs.
    """
    distance = 1
    while True:
        ahead = step(turn, direction, distance)
        behind = step(ahead, opposite(direction))
        if out_of_bounds(ahead, width, height) or has_wall_between(walls, ahead, behind):
            return distance
        distance += 1


def compress_moves(path, walls, width, height):
    """
    Counts the moves for a perfect run along `path`.

    path is the ordered edge list from (0, 0) to the goal. At every turn the
    run just finished is either walked (`to_use` single steps) or slid to the
    wall and walked back, whichever is cheaper. The last run always ends at
    the goal corner, so it costs one move.

    Returns:
      (int, list[MoveInstruction]): move count and instructions
    """
    if not path:
        return 0, []

    n_moves = 0
    instructions = []
    prev_direction = None
    prev_turn = (0, 0)

    for before, current in path:
        direction = direction_between(before, current)
        if prev_direction is None:
            prev_direction = direction
        elif prev_direction == direction:
            continue

        old_direction = prev_direction
        prev_direction = direction

        to_use = manhattan(prev_turn, before)
        prev_turn = before
        remaining = remaining_length(width, height, before, old_direction, walls)

        if to_use > 0 and remaining >= to_use:
            instructions.append(MoveInstruction(old_direction, to_use, False))
            n_moves += to_use
            continue
        elif remaining >= to_use:
            # nothing travelled yet (first edge)
            continue

        # slide to the wall, then walk back over the overshoot
        n_moves += remaining
        instructions.append(MoveInstruction(old_direction, 1, True))
        if remaining > 1:
            instructions.append(MoveInstruction(opposite(old_direction), remaining - 1, False))

    # zero-indexed, so these are the two cells next to the goal
    next_to_goal = {(width - 2, height - 1), (width - 1, height - 2)}
    n_moves += 1
    instructions.append(MoveInstruction(prev_direction, 1, prev_turn not in next_to_goal))

    return n_moves, instructions
