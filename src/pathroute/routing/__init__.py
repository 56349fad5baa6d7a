"""Route pattern parsing, precedence ordering and matching."""

from .captures import Captures
from .matches import Match, Matches, ReverseMatch
from .route import Route
from .router import DuplicatePolicy, Router
from .segments import Segment, SegmentKind
from .spec import RouteSpec

__all__ = [
    "Captures",
    "DuplicatePolicy",
    "Match",
    "Matches",
    "ReverseMatch",
    "Route",
    "RouteSpec",
    "Router",
    "Segment",
    "SegmentKind",
]
