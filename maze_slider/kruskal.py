import logging
import random

from maze_slider.disjoint_set import DisjointSet
from maze_slider.errors import InvalidDimensions
from maze_slider.grid import forward_neighbours

logger = logging.getLogger(__name__)


def validate_dimensions(width, height):
    # bool is an int subclass but never a sensible size
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensions(width, height)
    if width < 1 or height < 1:
        raise InvalidDimensions(width, height)


def all_cells(width, height):
    """Every (x, y) coordinate of the grid, column by column."""
    return [(x, y) for x in range(width) for y in range(height)]


def all_edges(width, height):
    """
    Every edge between adjacent cells, exactly once.

    Only the East and South neighbours are looked at, so an edge is always
    stored as (a, b) with b to the right of or below a. There are
    (width - 1) * height + (height - 1) * width of them.
    """
    edges = []
    for node in all_cells(width, height):
        for neighbour in forward_neighbours(node, width, height):
            edges.append((node, neighbour))
    return edges


def generate_maze(width, height, seed=None, rng=None):
    """
    Generates a perfect maze using randomized Kruskal's algorithm.

    Algorithm:
      1. List every cell and every edge between adjacent cells.
      2. Shuffle the edges. The order comes from an explicit random.Random so
         that a seed reproduces the same maze.
      3. Initialize a DisjointSet with each cell in its own set.
      4. For each edge (a, b):
           - union(a, b) merges the two sets: the edge becomes a corridor.
           - union(a, b) reports they were already joined: carving it would
             close a loop, so the edge is kept as a wall.

    The corridors form a spanning tree of the grid, so there is exactly one
    route between any two cells and
    len(walls) == len(edges) - (width * height - 1).

    Parameters:
      width (int): Number of columns, >= 1
      height (int): Number of rows, >= 1
      seed: Seed for a fresh random.Random (ignored when rng is given)
      rng (random.Random): Generator to draw the shuffle from

    Returns:
      frozenset: The wall edges

    Raises:
      InvalidDimensions: width or height is not a positive integer.
    """
    validate_dimensions(width, height)
    if rng is None:
        rng = random.Random(seed)

    cells = all_cells(width, height)
    edges = all_edges(width, height)
    rng.shuffle(edges)

    forest = DisjointSet(cells)
    walls = set()
    for a, b in edges:
        if not forest.union(a, b):
            walls.add((a, b))

    logger.debug("generated %dx%d maze: %d edges, %d walls", width, height, len(edges), len(walls))
    return frozenset(walls)


def passages(walls, width, height):
    """The corridor edges: every grid edge that is not a wall."""
    return [
        (a, b) for a, b in all_edges(width, height)
        if (a, b) not in walls and (b, a) not in walls
    ]
