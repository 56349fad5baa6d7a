"""Named values captured from a matched path."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Captures(BaseModel):
    """Parameter and wildcard values captured by a route match.

    ``params`` keeps one ``(name, value)`` pair per parameter segment in
    pattern order, repeated names included. Lookups by name see the last pair
    with that name.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    params: tuple[tuple[str, str], ...] = Field(
        default=(), description="Captured (name, value) pairs in pattern order"
    )
    wildcard: str | None = Field(default=None, description="Wildcard capture")

    @field_validator("params", mode="before")
    @classmethod
    def accept_mapping(cls, v: Any) -> Any:
        """Allow params to be given as a mapping"""
        if isinstance(v, Mapping):
            return tuple(v.items())
        return v

    def get(self, name: str, default: str | None = None) -> str | None:
        """Get the value captured for ``name``.

        Args:
            name: Parameter name
            default: Value returned when no parameter has that name

        Returns:
            The last value captured under ``name``, or ``default``
        """
        for param_name, value in reversed(self.params):
            if param_name == name:
                return value
        return default

    def names(self) -> list[str]:
        """Parameter names in pattern order, without duplicates"""
        return list(dict.fromkeys(name for name, _ in self.params))

    def as_dict(self) -> dict[str, str]:
        """Parameters as a dict; later pairs overwrite earlier ones"""
        return dict(self.params)

    def is_empty(self) -> bool:
        return not self.params and self.wildcard is None

    def __getitem__(self, name: str) -> str:
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def __contains__(self, name: object) -> bool:
        return any(param_name == name for param_name, _ in self.params)

    def __str__(self) -> str:
        parts = [f"{name}={value}" for name, value in self.params]
        if self.wildcard is not None:
            parts.append(f"*={self.wildcard}")
        return ", ".join(parts)
