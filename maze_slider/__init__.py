"""
Maze generation, solving and "perfect run" scoring.
"""

from maze_slider.astar import a_star, solve_maze
from maze_slider.errors import (
    InvalidDimensions,
    MazeError,
    SearchTimeout,
    SolutionNotFound,
    UnknownNode,
    Unsolvable,
)
from maze_slider.grid import DOWN, LEFT, RIGHT, UP, has_wall_between, in_bounds
from maze_slider.kruskal import generate_maze
from maze_slider.maze import Maze, Solution
from maze_slider.moves import MoveInstruction, compress_moves

__version__ = "0.1.0"

__all__ = (
    "__version__",
    "Maze",
    "Solution",
    "MoveInstruction",
    "generate_maze",
    "solve_maze",
    "a_star",
    "compress_moves",
    "has_wall_between",
    "in_bounds",
    "MazeError",
    "InvalidDimensions",
    "UnknownNode",
    "Unsolvable",
    "SearchTimeout",
    "SolutionNotFound",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
)
