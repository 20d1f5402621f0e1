"""Nearest-neighbor query with branch-and-bound tree traversal."""

from __future__ import annotations

from typing import Optional, Tuple

from ._kd_tree import KdTree
from ._spatial import T

# A stored element paired with its distance to the query point
_Candidate = Tuple[T, float]


def _closest(
    a: Optional[_Candidate], b: Optional[_Candidate]
) -> Optional[_Candidate]:
    """Closer of two candidates; ``a`` wins ties."""
    if a is None:
        return b
    if b is None:
        return a
    if b[1] < a[1]:
        return b
    return a


def _nearest_neighbor(
    node: KdTree[T], point: T, depth: int
) -> Optional[_Candidate]:
    if node.pivot is None:
        return None

    ordering_dimensions = node.ordering_dimensions
    dimension = ordering_dimensions[depth % len(ordering_dimensions)]
    point_value = dimension(point)
    pivot_value = dimension(node.pivot)

    if point_value < pivot_value:
        near, far = node.left, node.right
    else:
        near, far = node.right, node.left

    candidate = None
    if near is not None:
        candidate = _nearest_neighbor(near, point, depth + 1)
    best = _closest((node.pivot, point.distance_to(node.pivot)), candidate)

    # Distance to the splitting plane bounds every distance on the far side
    if far is not None and best[1] > abs(point_value - pivot_value):
        best = _closest(best, _nearest_neighbor(far, point, depth + 1))

    return best


def nearest_neighbor(tree: KdTree[T], point: T) -> Optional[T]:
    """Find the stored element closest to a query point.

    Parameters
    ----------
    tree : KdTree
        Spatial index built by `kd_tree()`.
    point : T
        Query point. Must be of the same kind as the stored elements so
        that the tree's ordering dimensions and ``distance_to`` apply.

    Returns
    -------
    T or None
        The stored element with the smallest ``point.distance_to``, or
        None when the tree is empty.

    Notes
    -----
    The query descends to the side of each split containing ``point``,
    then backtracks into the other side only when the distance to the
    best candidate so far exceeds the distance to the splitting plane.
    This visits O(log n) nodes on average and O(n) in the worst case.

    On an exact distance tie a node's pivot is preferred over anything
    found beneath it, and the near side is preferred over the far side.

    Query coordinates are not validated. With NaN coordinates the
    comparisons used for descent and pruning are meaningless and the
    result is unspecified.

    Examples
    --------
    >>> x = torch.tensor([[0.0, 0.0], [5.0, 5.0], [9.0, 9.0], [1.0, 1.0]])
    >>> tree = kd_tree(points(x), coordinate_dimensions(2))
    >>> nearest_neighbor(tree, Point(torch.tensor([1.2, 0.9]))).index
    3
    """
    best = _nearest_neighbor(tree, point, 0)
    if best is None:
        return None
    return best[0]
