"""Resolver input variants for group lookups.

Callers may hand a group around as nothing, a loaded ``Group``, a numeric id
or a slug. ``parse_group_identifier`` classifies the raw value once at the
boundary so the resolver only has to match on the variant.
"""

import re
from dataclasses import dataclass
from typing import Any, Union

from interrogator.core.exceptions import GroupNotFoundError
from interrogator.models.group import Group

_NUMERIC_RE = re.compile(r"^\s*[+-]?[0-9]+(\.[0-9]+)?\s*$")


@dataclass(frozen=True)
class Absent:
    """No identifier given."""


@dataclass(frozen=True)
class ByInstance:
    """An already loaded group."""
    group: Group


@dataclass(frozen=True)
class ById:
    """Lookup by primary key."""
    group_id: int


@dataclass(frozen=True)
class BySlug:
    """Lookup by slug."""
    slug: str


GroupIdentifier = Union[Absent, ByInstance, ById, BySlug]


def parse_group_identifier(value: Any) -> GroupIdentifier:
    """Classify a raw identifier into one of the lookup variants."""
    if value is None:
        return Absent()
    if isinstance(value, (Absent, ByInstance, ById, BySlug)):
        return value
    if isinstance(value, Group):
        return ByInstance(value)
    if isinstance(value, bool):
        raise TypeError("A boolean is not a valid group identifier")
    if isinstance(value, int):
        return ById(value)
    if isinstance(value, float):
        return _numeric_identifier(value)
    if isinstance(value, str):
        if _NUMERIC_RE.match(value):
            return _numeric_identifier(float(value))
        return BySlug(value)
    raise TypeError(f"Unsupported group identifier type: {type(value).__name__}")


def _numeric_identifier(value: float) -> ById:
    # A fractional id can never match a primary key
    if not value.is_integer():
        raise GroupNotFoundError(value, lookup="id")
    return ById(int(value))
