from typing import Iterable, List, Optional, TypeVar

from stepsearch.search_graph.node_expander import NodeExpander

from .listener import SearchListener
from .search_state import DEFAULT_EXPANSIONS_PER_STEP, SearchStatus
from .selectors import shortest_path_search

N = TypeVar("N")


def shortest_path(
    source: N,
    target: N,
    expander: Optional[NodeExpander[N]] = None,
    *,
    listeners: Iterable[SearchListener] = (),
    expansions_per_step: int = DEFAULT_EXPANSIONS_PER_STEP,
) -> Optional[List[N]]:
    """
    Runs a breadth-first search from ``source`` to ``target`` to completion.

    :param source: Node to start from.
    :param target: Node to find.
    :param expander: Provides the successors of each node. If None, nodes are expected to
        have a ``children()`` method.
    :param listeners: Listeners to register before the search starts.
    :param expansions_per_step: Passed on to the search state.
    :return: The shortest path, source and target included, or None if the target is not
        reachable.
    """
    search = shortest_path_search(
        source, target, expander, expansions_per_step=expansions_per_step
    )
    for listener in listeners:
        search.register_listener(listener)
    search.run_to_completion()
    if search.current_state() == SearchStatus.NO_PATH:
        return None
    return search.get_shortest_path()
