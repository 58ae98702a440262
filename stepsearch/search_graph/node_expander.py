from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, Mapping, TypeVar

N = TypeVar("N")


class NodeExpander(ABC, Generic[N]):
    """
    Represents the edges of a directed graph, as seen from each node. Nodes are arbitrary
    hashable objects; the expander only ever reads them.
    """

    @abstractmethod
    def neighbors(self, node: N) -> Iterable[N]:
        """
        Find the successors of a node. The order of the result determines which of several
        equally short paths a breadth-first search returns.
        """

    def filter_edges(self, predicate: Callable[[N, N], bool]) -> "NodeExpander[N]":
        """
        Returns an expander that only includes the edges ``(s, t)`` for which
        ``predicate(s, t)`` is True.
        """
        # pylint: disable=cyclic-import
        from .expander_transformer import PredicateFilterExpander

        return PredicateFilterExpander(self, predicate)

    def limit_edges(self, limit: int) -> "NodeExpander[N]":
        """
        Returns an expander that only includes the first ``limit`` edges of each node.
        """
        # pylint: disable=cyclic-import
        from .expander_transformer import LimitEdgesExpander

        return LimitEdgesExpander(self, limit)


class ChildrenExpander(NodeExpander[N]):
    """
    Expander for node types that carry their own adjacency, i.e., that have a
    ``children()`` method.
    """

    def neighbors(self, node: N) -> Iterable[N]:
        return node.children()


class AdjacencyExpander(NodeExpander[N]):
    """
    Expander backed by an adjacency mapping. Nodes that do not appear as keys have no
    outgoing edges.

    :param adjacency: Mapping from each node to its successors.
    """

    def __init__(self, adjacency: Mapping[N, Iterable[N]]):
        self.adjacency = adjacency

    def neighbors(self, node: N) -> Iterable[N]:
        return self.adjacency.get(node, ())


class FunctionExpander(NodeExpander[N]):
    """
    Expander that delegates to a plain function.

    :param neighbors_fn: Function from a node to its successors.
    """

    def __init__(self, neighbors_fn: Callable[[N], Iterable[N]]):
        self.neighbors_fn = neighbors_fn

    def neighbors(self, node: N) -> Iterable[N]:
        return self.neighbors_fn(node)
