"""pathroute - path-pattern matching with deterministic route precedence."""

from .common.logging import get_logger, setup_logging
from .config import RouteDefinition, RouterConfig
from .exceptions import DuplicateRouteError, PathRouteError, RouteParseError
from .routing import (
    Captures,
    DuplicatePolicy,
    Match,
    Matches,
    ReverseMatch,
    Route,
    Router,
    RouteSpec,
    Segment,
    SegmentKind,
)

__version__ = "0.1.0"


__all__ = [
    # Routing
    "Router",
    "Route",
    "RouteSpec",
    "Segment",
    "SegmentKind",
    "Match",
    "Matches",
    "ReverseMatch",
    "Captures",
    # Configuration
    "RouterConfig",
    "RouteDefinition",
    "DuplicatePolicy",
    # Exceptions
    "PathRouteError",
    "RouteParseError",
    "DuplicateRouteError",
    # Logging
    "get_logger",
    "setup_logging",
]
