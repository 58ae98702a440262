from . import search
from .search.bfs_search import shortest_path
from .search.errors import IllegalStateError, InvalidArgumentError, SearchError
from .search.listener import EventKind, EventRecorder, SearchEvent, SearchListener
from .search.search_state import SearchState, SearchStatus
from .search.selectors import (
    SourceNodeSelector,
    TargetNodeSelector,
    find_shortest_path,
    shortest_path_search,
)
from .search_graph.expander_transformer import (
    FilterEdgesExpander,
    LimitEdgesExpander,
    PredicateFilterExpander,
)
from .search_graph.node_expander import (
    AdjacencyExpander,
    ChildrenExpander,
    FunctionExpander,
    NodeExpander,
)
from .utils.logging import LoggingListener
