"""Segment types that make up a parsed route pattern."""

from dataclasses import dataclass
from enum import Enum


class SegmentKind(str, Enum):
    """Kinds of pattern segments"""

    SLASH = "slash"
    DOT = "dot"
    WILDCARD = "wildcard"
    PARAM = "param"
    EXACT = "exact"


# Precedence ranks, higher wins.
SEGMENT_RANKS: dict[SegmentKind, int] = {
    SegmentKind.SLASH: 1,
    SegmentKind.DOT: 2,
    SegmentKind.WILDCARD: 3,
    SegmentKind.PARAM: 5,
    SegmentKind.EXACT: 6,
}

# Appended to every sort key. Ranks above WILDCARD so that "/files/" beats
# "/files/*" for the path "/files/", where the wildcard would capture nothing.
END_RANK = 4
END_KEY: tuple[int, str] = (END_RANK, "")

SEPARATORS: dict[str, SegmentKind] = {
    "/": SegmentKind.SLASH,
    ".": SegmentKind.DOT,
}


@dataclass(frozen=True)
class Segment:
    """A single unit of a route pattern.

    ``value`` holds the literal text for ``EXACT`` segments and the capture
    name for ``PARAM`` segments. It is empty for separators and wildcards.
    """

    kind: SegmentKind
    value: str = ""

    @classmethod
    def slash(cls) -> "Segment":
        return cls(SegmentKind.SLASH)

    @classmethod
    def dot(cls) -> "Segment":
        return cls(SegmentKind.DOT)

    @classmethod
    def wildcard(cls) -> "Segment":
        return cls(SegmentKind.WILDCARD)

    @classmethod
    def param(cls, name: str) -> "Segment":
        return cls(SegmentKind.PARAM, name)

    @classmethod
    def exact(cls, text: str) -> "Segment":
        return cls(SegmentKind.EXACT, text)

    @property
    def rank(self) -> int:
        return SEGMENT_RANKS[self.kind]

    @property
    def is_separator(self) -> bool:
        return self.kind in (SegmentKind.SLASH, SegmentKind.DOT)

    @property
    def is_capture(self) -> bool:
        """True for segments that contribute a captured value"""
        return self.kind in (SegmentKind.PARAM, SegmentKind.WILDCARD)

    @property
    def sort_key(self) -> tuple[int, str]:
        """Ordering key: rank first, then literal text for exact segments.

        Parameter names are not part of the key: ``:id`` and ``:name`` at
        the same position compare equal.
        """
        if self.kind == SegmentKind.EXACT:
            return (self.rank, self.value)
        return (self.rank, "")

    def __str__(self) -> str:
        if self.kind == SegmentKind.SLASH:
            return "/"
        if self.kind == SegmentKind.DOT:
            return "."
        if self.kind == SegmentKind.WILDCARD:
            return "*"
        if self.kind == SegmentKind.PARAM:
            return f":{self.value}"
        return self.value
