import collections
import heapq
import itertools
import logging

from maze_slider.errors import SearchTimeout, Unsolvable
from maze_slider.grid import all_neighbours, has_wall_between, manhattan
from maze_slider.kruskal import validate_dimensions
from maze_slider.moves import compress_moves

logger = logging.getLogger(__name__)

ORIGIN = (0, 0)

# f_cost = g_cost + h_cost, h_cost is not stored
SearchNode = collections.namedtuple("SearchNode", ["xy", "parent", "g_cost", "f_cost"])


def _heuristic(a, b):
    """
    Manhattan distance heuristic.

    Never overestimates on a 4-connected unit-cost grid (admissible), and
    h(a) <= 1 + h(b) for neighbours a, b (consistent).
    """
    return manhattan(a, b)


def _expand(best, walls, width, height, goal, open_nodes, closed, pq, counter):
    """Push or update every reachable, unfinalized neighbour of `best`."""
    for neighbour in all_neighbours(best.xy, width, height):
        if has_wall_between(walls, best.xy, neighbour):
            continue
        if neighbour in closed:
            continue

        # distance from the origin, not the number of steps taken
        g_cost = neighbour[0] + neighbour[1]
        node = SearchNode(neighbour, best.xy, g_cost, g_cost + _heuristic(neighbour, goal))

        tracked = open_nodes.get(neighbour)
        if tracked is None or (tracked.f_cost > node.f_cost and g_cost < best.g_cost):
            open_nodes[neighbour] = node
            heapq.heappush(pq, (node.f_cost, next(counter), neighbour))


def trace_path(end_node, closed):
    """
    Follows parent links from the goal back to the origin.

    Returns:
      list: edges (parent, child) ordered from the origin to the goal
    """
    path = []
    current = end_node
    while current.xy != ORIGIN:
        parent = closed[current.parent]
        path.append((parent.xy, current.xy))
        current = parent
    path.reverse()
    return path


def a_star(walls, width, height, max_expansions=None):
    """
    A* search from (0, 0) to (width - 1, height - 1) around `walls`.

    Frontier:
      - open_nodes maps coordinate -> SearchNode for nodes not yet finalized.
      - pq holds (f_cost, seq, xy); entries whose node was replaced or
        finalized are skipped when popped. seq keeps equal-f pops FIFO.
    Closed:
      - closed maps coordinate -> finalized SearchNode; parents are looked
        up here when tracing the path.

    Parameters:
      walls: set of wall edges, either orientation
      max_expansions (int): optional cap on finalized nodes; exceeding it
                            raises SearchTimeout

    Returns:
      list: the path as edges ordered origin -> goal (empty for a 1x1 grid)

    Raises:
      Unsolvable: frontier exhausted before reaching the goal, which means
                  the walls did not come from generate_maze.
    """
    validate_dimensions(width, height)
    goal = (width - 1, height - 1)
    counter = itertools.count()

    start = SearchNode(ORIGIN, ORIGIN, 0, _heuristic(ORIGIN, goal))
    open_nodes = {ORIGIN: start}
    closed = {}
    pq = [(start.f_cost, next(counter), ORIGIN)]
    expansions = 0

    while pq:
        _, _, xy = heapq.heappop(pq)
        best = open_nodes.pop(xy, None)
        if best is None:
            continue # stale

        closed[xy] = best
        expansions += 1
        if xy == goal:
            logger.debug("reached %s after %d expansions", goal, expansions)
            return trace_path(best, closed)
        if max_expansions is not None and expansions >= max_expansions:
            raise SearchTimeout(max_expansions)

        _expand(best, walls, width, height, goal, open_nodes, closed, pq, counter)

    raise Unsolvable(f"no route from {ORIGIN} to {goal} after {expansions} expansions")


def solve_maze(walls, width, height, max_expansions=None):
    """
    Solves a maze and scores the solution as a perfect run.

    Returns:
      (int, list[MoveInstruction], list): move count, instructions, path
    """
    path = a_star(walls, width, height, max_expansions=max_expansions)
    n_moves, instructions = compress_moves(path, walls, width, height)
    logger.debug("solved %dx%d maze: path length %d, %d moves", width, height, len(path), n_moves)
    return n_moves, instructions, path
