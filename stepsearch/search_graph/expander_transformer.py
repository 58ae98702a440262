import operator
from abc import abstractmethod
from typing import Callable, List

from stepsearch.search.errors import InvalidArgumentError

from .node_expander import NodeExpander


class FilterEdgesExpander(NodeExpander):
    """
    Wraps another expander and hides some of its edges. Subclasses decide which edges
    survive by implementing ``include_edge``; the surviving neighbors keep their order.

    :param expander: The expander whose edges are filtered.
    """

    def __init__(self, expander: NodeExpander):
        self.expander = expander

    @abstractmethod
    def include_edge(self, s, t) -> bool:
        """
        Whether the edge ``s -> t`` of the wrapped expander is kept.
        """

    def neighbors(self, node) -> List:
        return [t for t in self.expander.neighbors(node) if self.include_edge(node, t)]


class PredicateFilterExpander(FilterEdgesExpander):
    """
    Keeps the edges ``(s, t)`` for which ``predicate(s, t)`` holds.
    """

    def __init__(self, expander: NodeExpander, predicate: Callable[[object, object], bool]):
        super().__init__(expander)
        self.predicate = predicate

    def include_edge(self, s, t) -> bool:
        return self.predicate(s, t)


class LimitEdgesExpander(NodeExpander):
    """
    Keeps at most ``limit`` successors per node, the first ones the wrapped expander
    reports. A limit of 0 leaves every node without successors.

    :param expander: The expander whose successors are truncated.
    :param limit: Maximum number of successors per node.
    :raises InvalidArgumentError: If ``limit`` is negative or not an integer.
    """

    def __init__(self, expander: NodeExpander, limit: int):
        if isinstance(limit, bool):
            raise InvalidArgumentError(f"The edge limit must be an int, got {limit!r}")
        try:
            limit = operator.index(limit)
        except TypeError as e:
            raise InvalidArgumentError(
                f"The edge limit must be an int, got {limit!r}"
            ) from e
        if limit < 0:
            raise InvalidArgumentError(f"The edge limit is negative: {limit}")
        self.expander = expander
        self.limit = limit

    def neighbors(self, node) -> List:
        result = []
        if self.limit == 0:
            return result
        for t in self.expander.neighbors(node):
            result.append(t)
            if len(result) == self.limit:
                break
        return result
