import logging
import operator
import time
from collections import deque
from enum import Enum
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from frozendict import frozendict

from stepsearch.search_graph.node_expander import NodeExpander

from .errors import IllegalStateError, InvalidArgumentError
from .listener import SearchListener

N = TypeVar("N")

logger = logging.getLogger(__name__)

DEFAULT_EXPANSIONS_PER_STEP = 1


class SearchStatus(Enum):
    """
    Lifecycle of a search. ``FOUND_PATH`` and ``NO_PATH`` are terminal.
    """

    UNINITIALIZED = "uninitialized"  # not yet stepped
    RUNNING = "running"
    FOUND_PATH = "found_path"  # target reached
    NO_PATH = "no_path"  # target not reachable

    @property
    def is_terminal(self) -> bool:
        return self in (SearchStatus.FOUND_PATH, SearchStatus.NO_PATH)


class SearchState(Generic[N]):
    """
    An incremental breadth-first search for the shortest path from ``source`` to ``target``.

    Nothing happens at construction; the search advances only when ``step``,
    ``run_to_completion`` or ``run_for`` is called, so it can be interleaved with other
    work and resumed at any point. Once the search is complete, further steps are no-ops.

    Use ``find_shortest_path`` or ``shortest_path_search`` to construct one.

    :param source: The node the search starts from.
    :param target: The node to find a path to.
    :param expander: Provides the successors of each node.
    :param expansions_per_step: How many nodes a single ``step`` may expand. Affects only
        how often control returns to the caller, never the result.
    """

    def __init__(
        self,
        source: N,
        target: N,
        expander: NodeExpander[N],
        expansions_per_step: int = DEFAULT_EXPANSIONS_PER_STEP,
    ):
        self._source = source
        self._target = target
        self._expander = expander
        self._expansions_per_step = DEFAULT_EXPANSIONS_PER_STEP
        self.set_expansions_per_step(expansions_per_step)

        self._status = SearchStatus.UNINITIALIZED
        self._began = False
        self._frontier = deque([source])
        self._parents: Dict[N, Optional[N]] = {source: None}
        self._listeners: List[SearchListener] = []

        self._num_expanded = 0
        self._num_steps = 0

    @property
    def source(self) -> N:
        return self._source

    @property
    def target(self) -> N:
        return self._target

    @property
    def expansions_per_step(self) -> int:
        return self._expansions_per_step

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def frontier(self) -> Tuple[N, ...]:
        """
        The discovered but not yet expanded nodes, in the order they will be expanded.
        """
        return tuple(self._frontier)

    @property
    def parents(self) -> frozendict:
        """
        Every node discovered so far, mapped to the node it was discovered from. The source
        maps to None.
        """
        return frozendict(self._parents)

    @property
    def num_reached(self) -> int:
        return len(self._parents)

    @property
    def num_expanded(self) -> int:
        return self._num_expanded

    @property
    def num_steps(self) -> int:
        """
        Number of calls to ``step`` that did any work.
        """
        return self._num_steps

    def set_expansions_per_step(self, expansions: int) -> "SearchState[N]":
        """
        Sets the number of node expansions per call to ``step``. Values below 1 are
        treated as 1.

        :param expansions: The number of expansions per step.
        :return: This search state.
        """
        if isinstance(expansions, bool):
            raise InvalidArgumentError(
                f"expansions_per_step must be an int, got {expansions!r}"
            )
        try:
            expansions = operator.index(expansions)
        except TypeError as e:
            raise InvalidArgumentError(
                f"expansions_per_step must be an int, got {expansions!r}"
            ) from e
        self._expansions_per_step = max(1, expansions)
        return self

    def register_listener(self, listener: SearchListener) -> "SearchState[N]":
        """
        Adds a listener. Listeners only receive events fired after they are registered;
        one registered from inside a callback starts with the next event.
        """
        if listener is None:
            raise InvalidArgumentError("The listener is None.")
        self._listeners.append(listener)
        return self

    def unregister_listener(self, listener: SearchListener) -> "SearchState[N]":
        """
        Removes the first registration of ``listener``. Does nothing if it is not
        registered.
        """
        for i, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[i]
                break
        return self

    def current_state(self) -> SearchStatus:
        """
        The current status. ``UNINITIALIZED`` means the search has not been stepped yet.
        """
        return self._status

    def is_complete(self) -> bool:
        return self._status.is_terminal

    def step(self) -> None:
        """
        Performs up to ``expansions_per_step`` expansions. Returns early as soon as the
        search completes.

        ``on_expand`` fires while the node is still at the head of ``frontier`` and before
        ``num_expanded`` counts it; the node is removed once its neighbors are known.

        If a listener or the expander raises, the error propagates and the step is cut
        short. The search stays consistent and can be resumed: a node whose expansion was
        interrupted is still at the head of the frontier (and gets ``on_expand`` again),
        and every discovered node is already on the frontier before listeners hear about
        it. Events that were not delivered because of the fault are not replayed: if
        ``on_reach`` raises, the remaining neighbors of that node are never reported as
        reached, although they are still searched.
        """
        if self.is_complete():
            return
        self._num_steps += 1

        if not self._began:
            self._began = True
            self._set_status(SearchStatus.RUNNING)
            self._notify("on_begin_search", self._source)

        for _ in range(self._expansions_per_step):
            if not self._frontier:
                self._set_status(SearchStatus.NO_PATH)
                self._notify("on_end_search_failure")
                return

            node = self._frontier[0]
            self._notify("on_expand", node)

            if node == self._target:
                self._frontier.popleft()
                self._num_expanded += 1
                self._set_status(SearchStatus.FOUND_PATH)
                self._notify("on_end_search_success", node)
                return

            children = list(self._expander.neighbors(node))
            self._frontier.popleft()
            self._num_expanded += 1

            reached = []
            for child in children:
                if child not in self._parents:
                    # we came to child from node
                    self._parents[child] = node
                    self._frontier.append(child)
                    reached.append(child)

            for child in reached:
                self._notify("on_reach", child)

    def run_to_completion(self) -> "SearchState[N]":
        """
        Steps until the search is complete. Terminates on any finite graph.
        """
        while not self.is_complete():
            self.step()
        return self

    def run_for(
        self, duration: float, clock: Optional[Callable[[], float]] = None
    ) -> "SearchState[N]":
        """
        Steps until ``duration`` seconds have elapsed or the search is complete, whichever
        comes first. Time is only checked between steps, so a large ``expansions_per_step``
        makes this coarse.

        At least one step is performed if the search is not yet complete, so repeated
        calls always make progress, even with a duration of 0.

        :param duration: The time budget, in seconds.
        :param clock: Returns the current time in seconds. Defaults to ``time.monotonic``.
        """
        if clock is None:
            clock = time.monotonic
        start = clock()
        while not self.is_complete():
            self.step()
            if clock() - start >= duration:
                break
        return self

    def get_shortest_path(self) -> List[N]:
        """
        The shortest path from source to target, both included.

        :raises IllegalStateError: If the search is not complete, or the target is not
            reachable from the source.
        """
        if self._status == SearchStatus.FOUND_PATH:
            return self._traceback_path()
        if self._status == SearchStatus.NO_PATH:
            raise IllegalStateError(
                "The target node is not reachable from the source node."
            )
        raise IllegalStateError("The path search is not yet complete.")

    def _traceback_path(self) -> List[N]:
        node = self._target
        path = [node]
        while node != self._source:
            node = self._parents[node]
            path.append(node)
        path.reverse()
        return path

    def _notify(self, method: str, *args):
        # snapshot, so listeners may register or unregister from inside a callback
        for listener in tuple(self._listeners):
            getattr(listener, method)(*args)

    def _set_status(self, status: SearchStatus):
        logger.debug(
            "Search %r -> %r: %s -> %s (expanded=%d, reached=%d)",
            self._source,
            self._target,
            self._status.name,
            status.name,
            self._num_expanded,
            len(self._parents),
        )
        self._status = status

    def __repr__(self):
        return (
            f"SearchState(source={self._source!r}, target={self._target!r}, "
            f"status={self._status.name}, expanded={self._num_expanded}, "
            f"frontier={len(self._frontier)})"
        )
