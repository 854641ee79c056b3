class RoutingError(Exception):
    """Base exception for route calculation failures."""


class InvalidParameter(RoutingError, ValueError):
    """Raised when a caller passes a value outside its accepted domain."""


class GraphNotFound(InvalidParameter, LookupError):
    """Raised when a graph id does not match any registered graph."""


class DataItemIncomplete(RoutingError):
    """Raised when data required for a computation is missing."""


class DataItemIncorrect(RoutingError, ValueError):
    """Raised when a connection set cannot form a vertex graph."""
