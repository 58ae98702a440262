from .bfs_search import shortest_path
from .errors import IllegalStateError, InvalidArgumentError, SearchError
from .listener import EventKind, EventRecorder, SearchEvent, SearchListener
from .search_state import SearchState, SearchStatus
from .selectors import (
    SourceNodeSelector,
    TargetNodeSelector,
    find_shortest_path,
    shortest_path_search,
)
