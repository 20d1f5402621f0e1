"""Batched nearest-neighbor queries over tensors of query points."""

from __future__ import annotations

import torch
from tensordict import tensorclass
from torch import Tensor

from ._kd_tree import KdTree
from ._nearest_neighbor import nearest_neighbor
from ._point import Point


@tensorclass
class NearestNeighbors:
    """Nearest-neighbor query results.

    Attributes
    ----------
    indices : Tensor
        ``Point.index`` of the nearest stored point, shape (m,).
        -1 when the tree is empty.
    distances : Tensor
        Distance to the nearest stored point, shape (m,).
        ``inf`` when the tree is empty.
    points : Tensor
        Coordinates of the nearest stored point, shape (m, d).
        ``nan`` when the tree is empty.
    """

    indices: Tensor
    distances: Tensor
    points: Tensor


def nearest_neighbors(
    tree: KdTree[Point],
    queries: Tensor,
) -> NearestNeighbors:
    """Find the nearest stored point for each row of a query tensor.

    Parameters
    ----------
    tree : KdTree of Point
        Spatial index built by `kd_tree()` from `points()`.
    queries : Tensor, shape (m, d)
        Query points.

    Returns
    -------
    NearestNeighbors
        Results with batch size ``[m]``, in the dtype and on the device
        of ``queries``.

    Notes
    -----
    Each row is answered independently by `nearest_neighbor()` using the
    norm order ``p`` of the stored points.

    Examples
    --------
    >>> x = torch.randn(1000, 3)
    >>> tree = kd_tree(points(x), coordinate_dimensions(3))
    >>> result = nearest_neighbors(tree, torch.randn(10, 3))
    >>> result.indices.shape
    torch.Size([10])
    """
    if queries.dim() != 2:
        raise RuntimeError(f"queries must be 2D (m, d), got {queries.dim()}D")

    m, d = queries.shape

    indices = torch.full((m,), -1, dtype=torch.int64, device=queries.device)
    distances = torch.full(
        (m,), float("inf"), dtype=queries.dtype, device=queries.device
    )
    nearest = torch.full(
        (m, d), float("nan"), dtype=queries.dtype, device=queries.device
    )

    if tree.pivot is not None:
        if tree.pivot.dimension != d:
            raise RuntimeError(
                f"Query dimension ({d}) must match "
                f"tree dimension ({tree.pivot.dimension})"
            )

        p = tree.pivot.p
        for i, row in enumerate(queries.unbind(0)):
            query = Point(row, p=p)
            found = nearest_neighbor(tree, query)
            indices[i] = found.index
            distances[i] = query.distance_to(found)
            nearest[i] = found.coordinates

    return NearestNeighbors(
        indices=indices,
        distances=distances,
        points=nearest,
        batch_size=[m],
    )
