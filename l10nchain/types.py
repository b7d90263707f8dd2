"""Value types exchanged with localization callers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass
class L10nKey:
    """A message identifier with optional formatting arguments."""

    id: str
    args: Optional[Mapping[str, Any]] = None


@dataclass
class L10nAttribute:
    """A formatted attribute of a message."""

    name: str
    value: str


@dataclass
class L10nMessage:
    """A formatted message value together with its attributes."""

    value: Optional[str]
    attributes: list[L10nAttribute] = field(default_factory=list)


class ResourceType(enum.Enum):
    """Whether a resource must be present for a bundle to be valid."""

    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(eq=False)
class ResourceId:
    """Identifier of a localization resource.

    Equality and hashing consider only ``value``; a ResourceId also
    compares equal to a plain string holding the same value.
    """

    value: str
    resource_type: ResourceType = ResourceType.REQUIRED

    def is_required(self) -> bool:
        return self.resource_type is ResourceType.REQUIRED

    def is_optional(self) -> bool:
        return self.resource_type is ResourceType.OPTIONAL

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResourceId):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value


def to_resource_id(value: str, resource_type: ResourceType) -> ResourceId:
    """Create a ResourceId with an explicit resource type."""
    return ResourceId(str(value), resource_type)