"""Spatial data structures for exact nearest-neighbor search.

This module provides a static k-d tree over arbitrary spatial entities with:
- Lower-median construction along caller-supplied ordering dimensions
- Exact nearest-neighbor queries with branch-and-bound pruning
- Tensor-backed `Point` entities and batched queries over (m, d) tensors
- Thread-safe concurrent queries (trees are immutable once built)

Note: Queries return None for an empty tree rather than raising.
"""

from ._exceptions import EmptyOrderingDimensionsError, SpacePartitioningError
from ._kd_tree import KdTree, kd_tree
from ._nearest_neighbor import nearest_neighbor
from ._nearest_neighbors import NearestNeighbors, nearest_neighbors
from ._point import Point, coordinate_dimensions, points
from ._spatial import OrderingDimension, Spatial

__all__ = [
    "EmptyOrderingDimensionsError",
    "KdTree",
    "NearestNeighbors",
    "OrderingDimension",
    "Point",
    "SpacePartitioningError",
    "Spatial",
    "coordinate_dimensions",
    "kd_tree",
    "nearest_neighbor",
    "nearest_neighbors",
    "points",
]
