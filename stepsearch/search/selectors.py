from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from stepsearch.search_graph.node_expander import ChildrenExpander, NodeExpander

from .errors import InvalidArgumentError
from .search_state import DEFAULT_EXPANSIONS_PER_STEP, SearchState

N = TypeVar("N")


def find_shortest_path(
    expander: Optional[NodeExpander[N]] = None,
) -> "SourceNodeSelector[N]":
    """
    Starts building a shortest path search, to be continued with ``select_source`` and
    ``select_target``::

        search = find_shortest_path(expander).select_source(a).select_target(b)

    :param expander: Provides the successors of each node. If None, nodes are expected to
        have a ``children()`` method.
    """
    if expander is None:
        expander = ChildrenExpander()
    return SourceNodeSelector(expander)


@dataclass(frozen=True)
class SourceNodeSelector(Generic[N]):
    """
    First stage of the builder, holds the expander.
    """

    expander: NodeExpander[N]

    def select_source(self, source: N) -> "TargetNodeSelector[N]":
        if source is None:
            raise InvalidArgumentError("The source node is None.")
        return TargetNodeSelector(self.expander, source)

    from_ = select_source


@dataclass(frozen=True)
class TargetNodeSelector(Generic[N]):
    """
    Second stage of the builder, holds the expander and the source node.
    """

    expander: NodeExpander[N]
    source: N

    def select_target(self, target: N) -> SearchState[N]:
        """
        Creates the search. No node is expanded until the search is stepped.
        """
        if target is None:
            raise InvalidArgumentError("The target node is None.")
        return SearchState(self.source, target, self.expander)

    to = select_target


def shortest_path_search(
    source: N,
    target: N,
    expander: Optional[NodeExpander[N]] = None,
    *,
    expansions_per_step: int = DEFAULT_EXPANSIONS_PER_STEP,
) -> SearchState[N]:
    """
    Creates a shortest path search in a single call. Equivalent to the
    ``find_shortest_path`` chain followed by ``set_expansions_per_step``.
    """
    return (
        find_shortest_path(expander)
        .select_source(source)
        .select_target(target)
        .set_expansions_per_step(expansions_per_step)
    )
