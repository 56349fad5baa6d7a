"""Route pattern parsing, precedence ordering and path matching."""

import re
from functools import lru_cache, total_ordering

from ..exceptions import RouteParseError
from .captures import Captures
from .segments import END_KEY, SEPARATORS, Segment, SegmentKind

PARAM_SIGIL = ":"
WILDCARD_SIGIL = "*"

# Splits on separators while keeping them: "a/:b.c" -> ["a", "/", ":b", ".", "c"]
_SEPARATOR_SPLIT = re.compile(r"([/.])")


def _parse_token(pattern: str, token: str) -> Segment:
    """Parse one non-separator token of a pattern"""
    if token.startswith(PARAM_SIGIL):
        name = token[len(PARAM_SIGIL) :]
        if not name:
            raise RouteParseError(pattern, "parameter name must not be empty")
        if PARAM_SIGIL in name or WILDCARD_SIGIL in name:
            raise RouteParseError(pattern, f"invalid parameter name '{name}'")
        return Segment.param(name)

    if token == WILDCARD_SIGIL:
        return Segment.wildcard()

    if token.startswith(WILDCARD_SIGIL):
        raise RouteParseError(pattern, "named wildcards are not permitted")

    return Segment.exact(token)


@lru_cache(maxsize=256)
def _parse_segments_cached(pattern: str) -> tuple[Segment, ...]:
    """Parse a pattern string into segments with caching.

    Cache size: 256 patterns (route tables are usually far smaller)
    """
    body = pattern[1:] if pattern.startswith("/") else pattern
    segments = [Segment.slash()]

    for token in _SEPARATOR_SPLIT.split(body):
        if not token:
            continue
        if token in SEPARATORS:
            segments.append(Segment(SEPARATORS[token]))
        else:
            segments.append(_parse_token(pattern, token))

    wildcard_positions = [
        index
        for index, segment in enumerate(segments)
        if segment.kind == SegmentKind.WILDCARD
    ]
    if len(wildcard_positions) > 1:
        raise RouteParseError(pattern, "only one wildcard is permitted")
    if wildcard_positions and wildcard_positions[0] != len(segments) - 1:
        raise RouteParseError(pattern, "wildcard must be the last segment")

    return tuple(segments)


def _dots_ahead(segments: tuple[Segment, ...]) -> tuple[int, ...]:
    """Count, for each position, the dots that follow it in the same component"""
    counts = [0] * len(segments)
    remaining = 0
    for index in range(len(segments) - 1, -1, -1):
        counts[index] = remaining
        kind = segments[index].kind
        if kind == SegmentKind.SLASH:
            remaining = 0
        elif kind == SegmentKind.DOT:
            remaining += 1
    return tuple(counts)


def _param_stop(path: str, start: int, dots_needed: int) -> int:
    """Find where a parameter starting at ``start`` ends.

    The parameter runs to the end of the current component, minus as many
    trailing dot-separated pieces as the rest of the component needs. Returns
    -1 when the component has too few dots.
    """
    stop = path.find("/", start)
    if stop == -1:
        stop = len(path)
    for _ in range(dots_needed):
        stop = path.rfind(".", start, stop)
        if stop == -1:
            return -1
    return stop


@total_ordering
class RouteSpec:
    """A parsed, immutable route pattern.

    Specs are compared by shape: segment kinds and literal text, in order,
    followed by an end marker. The first differing position decides.
    Parameter names do not take part, so ``/users/:id`` and
    ``/users/:user_id`` are equal. Greater specs take precedence.

    Where one spec is the other plus trailing segments, the shorter one ranks
    higher unless the extra segment is a literal or a parameter, so ``/users``
    sorts above ``/users/new``. Such pairs only ever match the same path when
    the extension is a trailing wildcard capturing nothing, where the shorter
    spec is the one that should win.
    """

    __slots__ = ("_source", "_segments", "_sort_key", "_dots_ahead")

    def __init__(self, source: str, segments: tuple[Segment, ...]):
        """Initialize route spec.

        Args:
            source: Pattern string the segments were parsed from
            segments: Parsed segments, starting with a slash
        """
        if not segments:
            raise RouteParseError(source, "a route must have at least one segment")
        self._source = source
        self._segments = segments
        self._sort_key = tuple(s.sort_key for s in segments) + (END_KEY,)
        self._dots_ahead = _dots_ahead(segments)

    @classmethod
    def parse(cls, pattern: str) -> "RouteSpec":
        """Parse a pattern string.

        Args:
            pattern: Route pattern (e.g., "/users/:id", "/files/*", "/:file.:ext")

        Returns:
            Parsed route spec

        Raises:
            TypeError: If pattern is not a string
            RouteParseError: If the pattern is malformed
        """
        if not isinstance(pattern, str):
            raise TypeError(
                f"Route pattern must be a string, got {type(pattern).__name__}"
            )
        return cls(pattern, _parse_segments_cached(pattern))

    @classmethod
    def from_value(cls, value: "str | RouteSpec") -> "RouteSpec":
        """Return ``value`` unchanged if it is already a spec, else parse it"""
        if isinstance(value, RouteSpec):
            return value
        return cls.parse(value)

    @property
    def source(self) -> str:
        return self._source

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def sort_key(self) -> tuple[tuple[int, str], ...]:
        return self._sort_key

    @property
    def param_names(self) -> list[str]:
        return [s.value for s in self._segments if s.kind == SegmentKind.PARAM]

    @property
    def has_wildcard(self) -> bool:
        return self._segments[-1].kind == SegmentKind.WILDCARD

    def match(self, path: str) -> list[str] | None:
        """Walk ``path`` against this spec.

        Args:
            path: Request path; a leading slash is implied if missing

        Returns:
            Raw captured strings, one per parameter or wildcard segment in
            pattern order, or None if the path does not match
        """
        if not path.startswith("/"):
            path = "/" + path

        captures: list[str] = []
        position = 0

        for index, segment in enumerate(self._segments):
            kind = segment.kind

            if kind == SegmentKind.WILDCARD:
                captures.append(path[position:])
                return captures

            if kind == SegmentKind.PARAM:
                stop = _param_stop(path, position, self._dots_ahead[index])
                if stop <= position:
                    return None
                captures.append(path[position:stop])
                position = stop
                continue

            literal = str(segment)
            if not path.startswith(literal, position):
                return None
            position += len(literal)

        if position != len(path):
            return None
        return captures

    def template(self, captures: Captures) -> str | None:
        """Render this spec into a path using ``captures``.

        Args:
            captures: Values for the parameters and wildcard

        Returns:
            Generated path, or None if a parameter or the wildcard has no value
        """
        parts: list[str] = []
        for segment in self._segments:
            if segment.kind == SegmentKind.PARAM:
                value = captures.get(segment.value)
                if value is None:
                    return None
                parts.append(value)
            elif segment.kind == SegmentKind.WILDCARD:
                if captures.wildcard is None:
                    return None
                parts.append(captures.wildcard)
            else:
                parts.append(str(segment))
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteSpec):
            return NotImplemented
        return self._sort_key == other._sort_key

    def __lt__(self, other: "RouteSpec") -> bool:
        if not isinstance(other, RouteSpec):
            return NotImplemented
        return self._sort_key < other._sort_key

    def __hash__(self) -> int:
        return hash(self._sort_key)

    def __str__(self) -> str:
        return "".join(str(segment) for segment in self._segments)

    def __repr__(self) -> str:
        return f"RouteSpec('{self._source}')"
