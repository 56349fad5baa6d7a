"""Match results produced by testing routes against a path."""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .captures import Captures
from .segments import SegmentKind

if TYPE_CHECKING:
    from .route import Route

T = TypeVar("T")


@total_ordering
class Match(Generic[T]):
    """Evidence that one route matches one path.

    Holds the route itself (and so its handler), the tested path and the raw
    captured strings in pattern order. Names are resolved by ``captures()``.
    Matches compare and sort by their route's precedence.

    The handler is shared with the router, not copied. A match stays valid
    only while the router is not mutated.
    """

    __slots__ = ("_path", "_route", "_raw_captures")

    def __init__(self, path: str, route: "Route[T]", captures: Sequence[str]):
        self._path = path
        self._route = route
        self._raw_captures = tuple(captures)

    @property
    def path(self) -> str:
        return self._path

    @property
    def route(self) -> "Route[T]":
        return self._route

    @property
    def handler(self) -> T:
        return self._route.handler

    @property
    def raw_captures(self) -> tuple[str, ...]:
        return self._raw_captures

    def captures(self) -> Captures:
        """Resolve the raw captures against the route's parameter names"""
        params: list[tuple[str, str]] = []
        wildcard: str | None = None

        capture_segments = (s for s in self._route.segments if s.is_capture)
        for segment, value in zip(capture_segments, self._raw_captures):
            if segment.kind == SegmentKind.PARAM:
                params.append((segment.value, value))
            else:
                wildcard = value

        return Captures(params=tuple(params), wildcard=wildcard)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self._route == other._route

    def __lt__(self, other: "Match[Any]") -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self._route < other._route

    def __hash__(self) -> int:
        return hash(self._route)

    def __repr__(self) -> str:
        return f"Match(route='{self._route}', path='{self._path}')"


class Matches(Generic[T]):
    """All matches for one path, in ascending precedence order.

    The best match is the last element.
    """

    def __init__(self, matches: Iterable[Match[T]] = ()):
        self._matches: list[Match[T]] = sorted(matches)

    @classmethod
    def for_routes_and_path(
        cls, routes: Iterable["Route[T]"], path: str
    ) -> "Matches[T]":
        """Test every route against ``path`` and keep the successes"""
        found = (route.is_match(path) for route in routes)
        return cls(match for match in found if match is not None)

    def best(self) -> Match[T] | None:
        """Get the highest precedence match, or None if nothing matched"""
        if not self._matches:
            return None
        return self._matches[-1]

    def is_empty(self) -> bool:
        return not self._matches

    def __len__(self) -> int:
        return len(self._matches)

    def __iter__(self) -> Iterator[Match[T]]:
        return iter(self._matches)

    def __reversed__(self) -> Iterator[Match[T]]:
        return reversed(self._matches)

    def __getitem__(self, index: int) -> Match[T]:
        return self._matches[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matches):
            return NotImplemented
        return self._matches == other._matches

    def __repr__(self) -> str:
        routes = ", ".join(f"'{match.route}'" for match in self._matches)
        return f"Matches([{routes}])"


@dataclass(frozen=True)
class ReverseMatch(Generic[T]):
    """A route and the path generated for it from a set of captures"""

    route: "Route[T]"
    path: str

    @property
    def handler(self) -> T:
        return self.route.handler
