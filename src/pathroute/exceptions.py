"""Custom exceptions for pathroute."""


class PathRouteError(Exception):
    """Base exception for all pathroute errors."""
    pass


class RouteParseError(PathRouteError):
    """Raised when a route pattern is malformed."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid route pattern '{pattern}': {reason}")


class DuplicateRouteError(PathRouteError):
    """Raised when a pattern duplicates a registered route under the raise policy."""

    def __init__(self, pattern: str, existing: str):
        self.pattern = pattern
        self.existing = existing
        super().__init__(
            f"Route pattern '{pattern}' duplicates existing route '{existing}'"
        )
