"""Configuration models for building routers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import RouteParseError
from .routing.router import DuplicatePolicy
from .routing.spec import RouteSpec


class RouteDefinition(BaseModel):
    """A single route pattern and its handler."""

    model_config = ConfigDict(
        str_strip_whitespace=True, arbitrary_types_allowed=True, extra="forbid"
    )

    pattern: str = Field(description="Route pattern, e.g. /users/:id")
    handler: Any = Field(default=None, description="Opaque handler value")

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Ensure the pattern parses"""
        try:
            RouteSpec.parse(v)
        except RouteParseError as e:
            raise ValueError(e.reason) from e
        return v


class RouterConfig(BaseModel):
    """Pydantic model for router construction."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    duplicate_policy: DuplicatePolicy = Field(
        default=DuplicatePolicy.KEEP_FIRST,
        description="Handling of patterns whose shape is already registered",
    )
    routes: list[RouteDefinition] = Field(
        default_factory=list, description="Routes to register, in order"
    )
