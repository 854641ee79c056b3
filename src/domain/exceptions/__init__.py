from .routing import (
    DataItemIncomplete,
    DataItemIncorrect,
    GraphNotFound,
    InvalidParameter,
    RoutingError,
)

__all__ = [
    "DataItemIncomplete",
    "DataItemIncorrect",
    "GraphNotFound",
    "InvalidParameter",
    "RoutingError",
]
