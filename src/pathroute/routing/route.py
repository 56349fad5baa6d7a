"""Route: a parsed pattern paired with an opaque handler."""

from functools import total_ordering
from typing import Generic, TypeVar

from .matches import Match
from .segments import Segment
from .spec import RouteSpec

T = TypeVar("T")


@total_ordering
class Route(Generic[T]):
    """A route spec together with the handler registered for it.

    Equality, ordering and hashing look at the RouteSpec only; the handler is
    never compared. Two routes with structurally identical specs are the
    same route even when their handlers differ.
    """

    __slots__ = ("_spec", "_handler")

    def __init__(self, spec: "RouteSpec | str", handler: T):
        """Initialize route.

        Args:
            spec: Parsed spec or pattern string
            handler: Value returned to the caller on a match

        Raises:
            RouteParseError: If spec is a malformed pattern string
        """
        self._spec = RouteSpec.from_value(spec)
        self._handler = handler

    @property
    def spec(self) -> RouteSpec:
        return self._spec

    @property
    def handler(self) -> T:
        return self._handler

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._spec.segments

    def is_match(self, path: str) -> "Match[T] | None":
        """Test ``path`` against this route.

        Args:
            path: Request path

        Returns:
            Match if the path matches, None otherwise
        """
        captures = self._spec.match(path)
        if captures is None:
            return None
        return Match(path, self, captures)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._spec == other._spec

    def __lt__(self, other: "Route[T]") -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._spec < other._spec

    def __hash__(self) -> int:
        return hash(self._spec)

    def __str__(self) -> str:
        return self._spec.source

    def __repr__(self) -> str:
        return f"Route('{self._spec.source}', handler={self._handler!r})"
