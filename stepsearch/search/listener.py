from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List


class SearchListener:
    """
    Observes the progress of a search. Every method is a no-op by default, so subclasses
    only override the events they care about.

    Listeners are called synchronously, in registration order. Anything a listener raises
    propagates to the caller of ``SearchState.step``.
    """

    def on_begin_search(self, source):
        """
        Called once, on the first step, before any node is expanded.
        """

    def on_reach(self, node):
        """
        Called when a node is discovered for the first time.
        """

    def on_expand(self, node):
        """
        Called when a node is removed from the frontier.
        """

    def on_end_search_success(self, target):
        """
        Called when the target is removed from the frontier.
        """

    def on_end_search_failure(self):
        """
        Called when the frontier runs out without the target being found.
        """


class EventKind(Enum):
    BEGIN_SEARCH = "begin_search"
    REACH = "reach"
    EXPAND = "expand"
    END_SEARCH_SUCCESS = "end_search_success"
    END_SEARCH_FAILURE = "end_search_failure"


@dataclass(frozen=True)
class SearchEvent:
    """
    A single notification delivered to a listener.

    :param kind: Which event this is.
    :param node: The node the event is about, or None for ``END_SEARCH_FAILURE``.
    """

    kind: EventKind
    node: Any = None


@dataclass(eq=False)
class EventRecorder(SearchListener):
    """
    Listener that keeps every event it receives, in order.
    """

    events: List[SearchEvent] = field(default_factory=list)

    def on_begin_search(self, source):
        self.events.append(SearchEvent(EventKind.BEGIN_SEARCH, source))

    def on_reach(self, node):
        self.events.append(SearchEvent(EventKind.REACH, node))

    def on_expand(self, node):
        self.events.append(SearchEvent(EventKind.EXPAND, node))

    def on_end_search_success(self, target):
        self.events.append(SearchEvent(EventKind.END_SEARCH_SUCCESS, target))

    def on_end_search_failure(self):
        self.events.append(SearchEvent(EventKind.END_SEARCH_FAILURE))

    def nodes_of_kind(self, kind: EventKind) -> List[Any]:
        """
        The nodes of all recorded events of the given kind, in order.
        """
        return [event.node for event in self.events if event.kind == kind]
