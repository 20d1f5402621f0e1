"""Capability required of entities stored in a k-d tree."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Spatial(Protocol):
    """Entity with a scalar distance to another entity of the same kind.

    The distance does not have to be a metric, but it must be
    non-negative and stable for the lifetime of any tree holding the
    entity. Nearest-neighbor pruning is exact only when the absolute
    difference along every ordering dimension is a lower bound on it.
    """

    def distance_to(self, other) -> float: ...


T = TypeVar("T", bound=Spatial)

# Extracts the scalar an entity is ranked by along one axis.
OrderingDimension = Callable[[T], float]
