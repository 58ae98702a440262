from collections import deque

import numpy as np


class DirectedGraphNode:
    """
    Adjacency-list node with integer identity, for use with ``ChildrenExpander``.
    """

    def __init__(self, node_id):
        self.node_id = node_id
        self._children = []
        self.expansions = 0

    def add_child(self, child):
        assert child is not None
        self._children.append(child)

    def children(self):
        self.expansions += 1
        return tuple(self._children)

    def __eq__(self, other):
        return isinstance(other, DirectedGraphNode) and self.node_id == other.node_id

    def __hash__(self):
        return hash(self.node_id)

    def __repr__(self):
        return str(self.node_id)


def example_graph():
    """
    a -> b, b -> c1, b -> c2, c1 -> d, d -> e, c2 -> e
    """
    nodes = {name: DirectedGraphNode(name) for name in ["a", "b", "c1", "c2", "d", "e"]}
    for s, t in [("a", "b"), ("b", "c1"), ("b", "c2"), ("c1", "d"), ("d", "e"), ("c2", "e")]:
        nodes[s].add_child(nodes[t])
    return nodes


def random_adjacency(seed, num_nodes, num_arcs):
    """
    Random directed multigraph over ``range(num_nodes)``, as an adjacency dict.
    """
    rng = np.random.RandomState(seed)
    adjacency = {i: [] for i in range(num_nodes)}
    for _ in range(num_arcs):
        tail, head = rng.randint(num_nodes, size=2)
        adjacency[int(tail)].append(int(head))
    return adjacency


def bfs_distances(adjacency, source):
    """
    Reference single-source distances, computed independently of the library.
    """
    distances = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for child in adjacency.get(node, ()):
            if child not in distances:
                distances[child] = distances[node] + 1
                queue.append(child)
    return distances


class FakeClock:
    """
    Clock that advances by ``tick`` seconds every time it is read.
    """

    def __init__(self, tick):
        self.tick = tick
        self.now = 0.0
        self.reads = 0

    def __call__(self):
        value = self.now
        self.now += self.tick
        self.reads += 1
        return value
