class SearchError(Exception):
    """
    Base class for errors raised by the search machinery itself. Errors raised by node
    expanders or listeners are never wrapped in this.
    """


class InvalidArgumentError(SearchError, ValueError):
    """
    A required argument was missing or malformed. Always the caller's to fix.
    """


class IllegalStateError(SearchError, RuntimeError):
    """
    An operation was requested in a search state that does not support it, e.g., asking
    for the path of a search that has not finished.
    """
