import collections

from graphviz import Digraph

NODE_COLOR = "#bdc3c7"
START_COLOR = "#1abc9c"
GOAL_COLOR = "#e74c3c"
PATH_COLOR = "#f39c12"


def tree_edges(maze):
    """
    Corridor edges oriented away from the start cell.

    The corridors form a spanning tree, so a BFS from the start reaches every
    cell exactly once and gives each edge a parent -> child direction.
    """
    adjacency = collections.defaultdict(list)
    for a, b in maze.passages():
        adjacency[a].append(b)
        adjacency[b].append(a)

    edges = []
    visited = {maze.start_pos}
    queue = collections.deque([maze.start_pos])
    while queue:
        node = queue.popleft()
        for nb in adjacency[node]:
            if nb not in visited:
                visited.add(nb)
                edges.append((node, nb))
                queue.append(nb)
    return edges


def maze_tree_graph(maze):
    """Builds a graphviz Digraph of the maze's passage tree, solution highlighted."""
    on_path = set(maze.solution_path or [])
    dot = Digraph(name=f"maze_{maze.width}x{maze.height}")
    dot.attr("node", shape="circle", style="filled", fillcolor=NODE_COLOR, fontsize="10")

    for parent, child in tree_edges(maze):
        dot.node(str(parent))
        dot.node(str(child))
        if (parent, child) in on_path:
            dot.edge(str(parent), str(child), color=PATH_COLOR, penwidth="3")
        else:
            dot.edge(str(parent), str(child))

    # markers last so they override the default fill
    dot.node(str(maze.start_pos), fillcolor=START_COLOR)
    dot.node(str(maze.goal_pos), fillcolor=GOAL_COLOR)
    return dot


def render_maze_tree(maze, filename, fmt="png", view=False):
    """Renders the passage tree to `filename`.<fmt>; needs the graphviz binaries."""
    dot = maze_tree_graph(maze)
    dot.format = fmt
    return dot.render(filename, view=view, cleanup=True)
