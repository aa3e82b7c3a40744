class MazeError(Exception):
    """Base class for every error raised by maze_slider."""


class InvalidDimensions(MazeError, ValueError):
    """Width or height is not a positive integer."""

    def __init__(self, width, height):
        super().__init__(f"maze dimensions must be positive integers, got {width!r}x{height!r}")
        self.width = width
        self.height = height


class UnknownNode(MazeError, KeyError):
    """
    A disjoint-set lookup was made for a node that was never registered.

    This is an internal consistency violation: the generator registers every
    cell before it starts merging, so this should never reach a caller.
    """

    def __init__(self, node):
        super().__init__(f"could not find node {node!r}")
        self.node = node

    def __str__(self):
        # KeyError quotes its message otherwise
        return self.args[0]


class Unsolvable(MazeError):
    """The pathfinder ran out of frontier before reaching the goal."""


class SearchTimeout(Unsolvable):
    """The pathfinder hit its caller-imposed expansion cap."""

    def __init__(self, max_expansions):
        super().__init__(f"search gave up after {max_expansions} expansions")
        self.max_expansions = max_expansions


class SolutionNotFound(MazeError):
    """A solution was requested before it was computed."""
