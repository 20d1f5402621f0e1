"""Tensor-backed point entities for k-d trees."""

from __future__ import annotations

import functools
import warnings
from dataclasses import dataclass

import torch
from torch import Tensor


@dataclass(frozen=True, eq=False)
class Point:
    """Point in d-dimensional space.

    Parameters
    ----------
    coordinates : Tensor
        Coordinates, shape (d,).
    index : int, default=-1
        Row of the tensor the point was taken from, or -1.
    p : float, default=2.0
        Minkowski p-norm used by `distance_to` (2.0 = Euclidean,
        1.0 = Manhattan, ``inf`` = Chebyshev).

    Notes
    -----
    For ``p >= 1`` the difference along any single coordinate is a lower
    bound on `distance_to`, which keeps nearest-neighbor pruning exact.

    Examples
    --------
    >>> a = Point(torch.tensor([0.0, 0.0]))
    >>> b = Point(torch.tensor([3.0, 4.0]))
    >>> a.distance_to(b)
    5.0
    """

    coordinates: Tensor
    index: int = -1
    p: float = 2.0

    @property
    def dimension(self) -> int:
        """Number of coordinates."""
        return self.coordinates.shape[-1]

    def distance_to(self, other: Point) -> float:
        return torch.linalg.vector_norm(
            self.coordinates - other.coordinates, ord=self.p
        ).item()


def _coordinate(axis: int, point: Point) -> float:
    return point.coordinates[axis].item()


def coordinate_dimensions(d: int) -> tuple:
    """Ordering dimensions for `Point` entities with ``d`` coordinates.

    Parameters
    ----------
    d : int
        Number of coordinates.

    Returns
    -------
    tuple of callable
        ``d`` functions; the ``i``-th returns coordinate ``i`` of a point
        as a Python float.
    """
    if d <= 0:
        raise RuntimeError(f"d must be > 0, got {d}")

    return tuple(functools.partial(_coordinate, axis) for axis in range(d))


def points(x: Tensor, *, p: float = 2.0) -> list[Point]:
    """Split a point cloud into `Point` entities.

    Parameters
    ----------
    x : Tensor, shape (n, d)
        Point coordinates, one point per row.
    p : float, default=2.0
        Minkowski p-norm used for distances between the points.

    Returns
    -------
    list of Point
        ``n`` points; point ``i`` views row ``i`` of ``x`` and has
        ``index == i``.

    Warns
    -----
    RuntimeWarning
        If ``x`` contains NaN or infinite values. Ordering and pruning
        comparisons are undefined for such points.

    Examples
    --------
    >>> [point.index for point in points(torch.randn(3, 2))]
    [0, 1, 2]
    """
    if x.dim() != 2:
        raise RuntimeError(f"x must be 2D (n, d), got {x.dim()}D")

    if x.numel() > 0 and not torch.isfinite(x).all():
        warnings.warn(
            "x contains non-finite coordinates; nearest-neighbor queries "
            "involving these points are unspecified.",
            RuntimeWarning,
            stacklevel=2,
        )

    return [Point(row, index=i, p=p) for i, row in enumerate(x.unbind(0))]
