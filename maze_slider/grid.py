"""
Grid topology helpers shared by the generator, the pathfinder, the move
compressor and any renderer sitting on top of them.

Coordinates: (x, y) where x is column (0 to width-1) and y is row
(0 to height-1). Origin (0, 0) is top-left, y grows downward.
"""

# Direction vectors, matching the interaction buttons
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


def forward_neighbours(node, width, height):
    """Neighbours one to the right and one down, so each edge is seen once."""
    x, y = node
    adjacent = []
    if x + 1 < width:
        adjacent.append((x + 1, y))
    if y + 1 < height:
        adjacent.append((x, y + 1))
    return adjacent


def all_neighbours(node, width, height):
    """All in-bounds neighbours: right, down, left, up."""
    x, y = node
    adjacent = forward_neighbours(node, width, height)
    if x > 0:
        adjacent.append((x - 1, y))
    if y > 0:
        adjacent.append((x, y - 1))
    return adjacent


def in_bounds(node, width, height):
    x, y = node
    return 0 <= x < width and 0 <= y < height


def out_of_bounds(node, width, height):
    return not in_bounds(node, width, height)


def has_wall_between(walls, a, b):
    """
    Whether the edge between a and b is walled off.

    Edges are unordered, so both orientations are probed.
    """
    return (a, b) in walls or (b, a) in walls


def manhattan(a, b):
    (x1, y1) = a
    (x2, y2) = b
    return abs(x1 - x2) + abs(y1 - y2)


def step(node, direction, amount=1):
    return (node[0] + direction[0] * amount, node[1] + direction[1] * amount)


def direction_between(a, b):
    """Unit direction vector for the move a -> b between adjacent cells."""
    diff = (b[0] - a[0], b[1] - a[1])
    if diff not in DIRECTIONS:
        raise ValueError(f"{a!r} and {b!r} are not grid-adjacent")
    return diff
