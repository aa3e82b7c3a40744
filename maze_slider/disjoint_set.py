from maze_slider.errors import UnknownNode


class DisjointSet:
    """
    Disjoint Set Union (Union-Find) over an arbitrary collection of hashable nodes.

    Representation:
      - self.parent maps each node to its parent in the union-find forest.
        A node that is its own parent is the root (representative) of its set.
      - self.rank maps each node to an upper bound on the height of the tree
        rooted at it. Only meaningful for roots.
      - Both are plain dicts keyed by node; nodes are grid coordinates with no
        identity beyond their value, so there are no object graphs to manage.

    Complexity:
      - Path compression in find() plus union by rank in union() gives
        O(α(n)) amortized time per operation (α is inverse Ackermann).
    """
    def __init__(self, nodes):
        self.parent = {}
        self.rank = {}
        for node in nodes:
            self.parent[node] = node  # Each node is its own parent initially
            self.rank[node] = 0       # All trees start with rank 0
        self._sets = len(self.parent)

    def __contains__(self, node):
        return node in self.parent

    def __len__(self):
        return len(self.parent)

    @property
    def set_count(self):
        """Number of disjoint sets currently in the partition."""
        return self._sets

    def find(self, node):
        """
        Find operation: returns the root of the set containing node.

        Algorithm:
          1. Follow parent pointers until we reach a node that is its own parent.
          2. Walk the same chain a second time, pointing every visited node
             directly at the root (path compression).

        Iterative rather than recursive so long chains can't hit the
        interpreter's recursion limit on large grids.

        Raises:
          UnknownNode: node was never registered.
        """
        try:
            root = self.parent[node]
        except KeyError:
            raise UnknownNode(node) from None

        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression
        while node != root:
            self.parent[node], node = root, self.parent[node]
        return root

    def union(self, a, b):
        """
        Union operation: merges the sets containing a and b.

        Returns:
          bool: True if two sets were merged, False if a and b were already
                in the same set (the edge a-b would close a cycle). Nothing
                is mutated in the False case.

        Union by rank:
          - Attach the tree with smaller rank under the tree with larger rank.
          - On a tie, attach either way and increment the new root's rank.
        """
        a_root, b_root = self.find(a), self.find(b)
        if a_root == b_root:
            return False # Already in the same set
        if self.rank[a_root] < self.rank[b_root]:
            self.parent[a_root] = b_root
        elif self.rank[b_root] < self.rank[a_root]:
            self.parent[b_root] = a_root
        else:
            self.parent[b_root] = a_root
            self.rank[a_root] += 1
        self._sets -= 1
        return True

    def connected(self, a, b):
        return self.find(a) == self.find(b)
