"""Router: an ordered set of routes queried by path."""

from bisect import bisect_left
from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from ..common.logging import get_logger
from ..exceptions import DuplicateRouteError, RouteParseError
from .captures import Captures
from .matches import Match, Matches, ReverseMatch
from .route import Route
from .spec import RouteSpec

if TYPE_CHECKING:
    from ..config import RouterConfig

logger = get_logger(__name__)

T = TypeVar("T")


class DuplicatePolicy(str, Enum):
    """What a router does when a pattern's shape is already registered."""

    KEEP_FIRST = "keep_first"
    RAISE = "raise"


class Router(Generic[T]):
    """An ordered set of routes, each with an opaque handler of type T.

    Routes are kept sorted by precedence as they are added, so a query can
    scan from the highest precedence route down and stop at the first match.

    Routes are keyed by shape. Adding a pattern whose shape is already
    registered does not replace the existing handler: the first handler
    stays, or ``DuplicateRouteError`` is raised under
    ``DuplicatePolicy.RAISE``.

    ``routes`` follows ``RouteSpec`` order, which puts ``/users`` above
    ``/users/new``: a pattern ending where another continues with a separator
    ranks higher. This never changes which route ``best_match`` returns.

    Register every route before querying. Match results share route storage
    with the router. To share a router between threads, build it completely
    first and only read from it afterwards.

    Usage::

        router = Router()
        router.add("/users/:id", show_user)
        match = router.best_match("/users/42")
        match.handler, match.captures()["id"]
    """

    def __init__(
        self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.KEEP_FIRST
    ):
        self._routes: list[Route[T]] = []
        self._duplicate_policy = duplicate_policy

    @classmethod
    def from_config(cls, config: "RouterConfig") -> "Router[T]":
        """Build a router from a validated configuration.

        Args:
            config: Router configuration

        Returns:
            Router with every configured route added in order
        """
        router: Router[T] = cls(duplicate_policy=config.duplicate_policy)
        for definition in config.routes:
            router.add(definition.pattern, definition.handler)
        logger.info("Router built from config", routes=len(router))
        return router

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return self._duplicate_policy

    @property
    def routes(self) -> tuple[Route[T], ...]:
        """Registered routes in ascending precedence order"""
        return tuple(self._routes)

    def add(self, pattern: "str | RouteSpec", handler: T) -> None:
        """Add a route.

        Args:
            pattern: Pattern string or parsed spec
            handler: Value returned with matches for this route

        Raises:
            RouteParseError: If the pattern is malformed; the router is unchanged
            DuplicateRouteError: If the shape is already registered and the
                policy is ``DuplicatePolicy.RAISE``
        """
        route = Route(pattern, handler)
        index = bisect_left(self._routes, route)

        if index < len(self._routes) and self._routes[index] == route:
            existing = self._routes[index]
            if self._duplicate_policy == DuplicatePolicy.RAISE:
                raise DuplicateRouteError(route.spec.source, existing.spec.source)
            logger.warning(
                "Duplicate route ignored",
                pattern=route.spec.source,
                existing=existing.spec.source,
            )
            return

        self._routes.insert(index, route)
        logger.debug(
            "Route added", pattern=route.spec.source, routes=len(self._routes)
        )

    def matches(self, path: str) -> Matches[T]:
        """Get every route that matches ``path``.

        ``best_match`` is cheaper when only the winner is needed. The result
        may be empty.
        """
        return Matches.for_routes_and_path(self._routes, path)

    def best_match(self, path: str) -> Match[T] | None:
        """Get the highest precedence route matching ``path``.

        Compare two routes segment by segment; the first differing pair
        decides, with ``Exact > Param > Wildcard > separators``. So
        ``/hello`` > ``/:param`` > ``/*``. Precedence never depends on the
        path, so routes are scanned from highest to lowest and the first
        match is returned.
        """
        for route in reversed(self._routes):
            match = route.is_match(path)
            if match is not None:
                return match
        return None

    def best_reverse_match(self, captures: Captures) -> ReverseMatch[T] | None:
        """Find the highest precedence route that consumes exactly ``captures``.

        A route qualifies when its parameter names are the captured names and
        it has a wildcard exactly when ``captures`` has a wildcard value.

        Args:
            captures: Parameter values and optional wildcard value

        Returns:
            ReverseMatch with the generated path, or None
        """
        names = set(captures.names())
        wants_wildcard = captures.wildcard is not None

        for route in reversed(self._routes):
            spec = route.spec
            if set(spec.param_names) != names or spec.has_wildcard != wants_wildcard:
                continue
            path = spec.template(captures)
            if path is not None:
                return ReverseMatch(route=route, path=path)
        return None

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route[T]]:
        return iter(self._routes)

    def __contains__(self, pattern: object) -> bool:
        if not isinstance(pattern, (str, RouteSpec)):
            return False
        try:
            probe: Route[None] = Route(pattern, None)
        except RouteParseError:
            return False
        index = bisect_left(self._routes, probe)
        return index < len(self._routes) and self._routes[index] == probe

    def __repr__(self) -> str:
        patterns = ", ".join(f"'{route}'" for route in self._routes)
        return f"Router({{{patterns}}})"
