import logging
from typing import Optional

from stepsearch.search.listener import SearchListener


class LoggingListener(SearchListener):
    """
    Forwards every search event to a logger. The library never configures handlers, so
    nothing is emitted unless the application sets up logging.

    :param logger: Logger to write to. Defaults to this module's logger.
    :param level: Level to log events at.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.level = level

    def on_begin_search(self, source):
        self.logger.log(self.level, "Search started from %r", source)

    def on_reach(self, node):
        self.logger.log(self.level, "Reached %r", node)

    def on_expand(self, node):
        self.logger.log(self.level, "Expanding %r", node)

    def on_end_search_success(self, target):
        self.logger.log(self.level, "Found a path to %r", target)

    def on_end_search_failure(self):
        self.logger.log(self.level, "Target not reachable")
