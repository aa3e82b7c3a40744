import collections

from maze_slider.astar import solve_maze
from maze_slider.errors import SolutionNotFound
from maze_slider.grid import DIRECTIONS, has_wall_between, out_of_bounds, step
from maze_slider.kruskal import generate_maze, passages

Solution = collections.namedtuple("Solution", ["move_count", "directions"])


class Maze:
    """
    A generated maze together with its solution, once computed.

    The walls are fixed at construction. The solution is computed on demand
    by compute_solution() and then served from get_solution(), which keeps
    the "slide until blocked" scoring next to the move_max() interaction it
    describes.
    """
    def __init__(self, width, height, seed=None, rng=None):
        self.width = width
        self.height = height
        self.walls = generate_maze(width, height, seed=seed, rng=rng)
        self.start_pos = (0, 0)
        self.goal_pos = (width - 1, height - 1)
        self.instructions = None
        self.solution_path = None
        self._solution = None

    def has_wall_between(self, a, b):
        """Whether a and b are blocked off, by a wall or by the grid edge."""
        w, h = self.width, self.height
        return has_wall_between(self.walls, a, b) or out_of_bounds(a, w, h) or out_of_bounds(b, w, h)

    def passages(self):
        return passages(self.walls, self.width, self.height)

    def compute_solution(self, max_expansions=None):
        """Solves the maze and caches the result for get_solution()."""
        n_moves, instructions, path = solve_maze(self.walls, self.width, self.height, max_expansions=max_expansions)
        self.instructions = instructions
        self.solution_path = path
        self._solution = Solution(n_moves, [i.label for i in instructions])
        return self._solution

    def get_solution(self):
        """
        Returns the cached Solution: (move_count, directions).

        directions holds human readable labels such as "⇾ 2 right (+2)".

        Raises:
          SolutionNotFound: compute_solution() has not been called yet.
        """
        if self._solution is None:
            raise SolutionNotFound("make sure to call `.compute_solution()` first")
        return self._solution

    def move_max(self, current, direction):
        """Slides from `current` in `direction` as far as the walls allow."""
        if direction not in DIRECTIONS:
            raise ValueError(f"not a direction: {direction!r}")
        while True:
            n = step(current, direction)
            if self.has_wall_between(current, n):
                return current
            current = n

    def __repr__(self):
        return f"<Maze {self.width}x{self.height} walls={len(self.walls)}>"
