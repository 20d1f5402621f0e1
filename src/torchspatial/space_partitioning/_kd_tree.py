"""k-d tree implementation with lower-median splitting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, Sequence

from ._exceptions import EmptyOrderingDimensionsError
from ._spatial import OrderingDimension, T


@dataclass(frozen=True, eq=False)
class KdTree(Generic[T]):
    """k-d tree spatial data structure.

    Each node stores the lower median of its input along the ordering
    dimension selected by its depth, with the elements ranked below it in
    ``left`` and the elements ranked above it in ``right``. Use `kd_tree()`
    to construct instances.

    Attributes
    ----------
    ordering_dimensions : tuple of callable
        Scalar extraction functions, one per axis. Shared by every node.
        The node at depth ``d`` splits on
        ``ordering_dimensions[d % len(ordering_dimensions)]``.
    pivot : T or None
        Median element of this node. None only for a tree built from an
        empty collection.
    left : KdTree or None
        Subtree of elements ranked at or below the pivot.
    right : KdTree or None
        Subtree of elements ranked at or above the pivot.

    Notes
    -----
    Trees are immutable. Once `kd_tree()` returns, a tree can be queried
    from any number of threads without locking.

    ``len(tree)`` is 0 for an empty tree, so an empty tree is falsy. Test
    for a missing child with ``tree.left is None`` rather than truthiness.

    Examples
    --------
    >>> x = torch.randn(100, 3)
    >>> tree = kd_tree(points(x), coordinate_dimensions(3))
    >>> len(tree)
    100
    """

    ordering_dimensions: tuple[OrderingDimension, ...] = field(repr=False)
    pivot: Optional[T] = None
    left: Optional[KdTree[T]] = None
    right: Optional[KdTree[T]] = None

    def __len__(self) -> int:
        if self.pivot is None:
            return 0
        count = 1
        if self.left is not None:
            count += len(self.left)
        if self.right is not None:
            count += len(self.right)
        return count

    def __iter__(self) -> Iterator[T]:
        """Yield stored elements: left subtree, pivot, then right subtree."""
        if self.pivot is None:
            return
        if self.left is not None:
            yield from self.left
        yield self.pivot
        if self.right is not None:
            yield from self.right

    @property
    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        if self.pivot is None:
            return 0
        return 1 + max(
            self.left.height if self.left is not None else 0,
            self.right.height if self.right is not None else 0,
        )

    def nearest_neighbor(self, point: T) -> Optional[T]:
        """Stored element closest to ``point``, or None if the tree is empty.

        See `nearest_neighbor()`.
        """
        from ._nearest_neighbor import nearest_neighbor

        return nearest_neighbor(self, point)


def _build(
    items: Sequence[T],
    ordering_dimensions: tuple[OrderingDimension, ...],
    depth: int,
) -> KdTree[T]:
    n = len(items)
    if n == 0:
        return KdTree(ordering_dimensions)

    dimension = ordering_dimensions[depth % len(ordering_dimensions)]

    # sorted() is stable, so elements with equal values keep input order
    ordered = sorted(items, key=dimension)
    skips = n // 2

    left = None
    if skips > 0:
        left = _build(ordered[:skips], ordering_dimensions, depth + 1)

    right = None
    if skips + 1 < n:
        right = _build(ordered[skips + 1 :], ordering_dimensions, depth + 1)

    return KdTree(ordering_dimensions, ordered[skips], left, right)


def kd_tree(
    items: Iterable[T],
    ordering_dimensions: Sequence[OrderingDimension],
) -> KdTree[T]:
    """Build a k-d tree from spatial entities using lower-median splits.

    Parameters
    ----------
    items : iterable of T
        Entities to index. Each must provide ``distance_to(other)``.
        May be empty.
    ordering_dimensions : sequence of callable
        Functions ``T -> float`` extracting one coordinate each. The root
        splits on the first, its children on the second, and so on,
        cycling back to the first.

    Returns
    -------
    KdTree
        Root of the tree. A tree built from an empty collection has no
        pivot and answers every query with None.

    Raises
    ------
    EmptyOrderingDimensionsError
        If ``ordering_dimensions`` is empty.

    Notes
    -----
    Every node stably sorts its whole slice and takes the element at
    position ``n // 2`` as its pivot, so construction costs
    O(n log² n) and the tree shape depends only on the input order and
    the ordering dimensions.

    Entities are stored as given; they are never copied or mutated.

    Examples
    --------
    >>> x = torch.tensor([[0.0, 0.0], [5.0, 5.0], [9.0, 9.0], [1.0, 1.0]])
    >>> tree = kd_tree(points(x), coordinate_dimensions(2))
    >>> tree.pivot.coordinates
    tensor([5., 5.])
    >>> tree.height
    3
    """
    ordering_dimensions = tuple(ordering_dimensions)
    if len(ordering_dimensions) == 0:
        raise EmptyOrderingDimensionsError(
            "ordering_dimensions must contain at least one function"
        )

    return _build(list(items), ordering_dimensions, 0)
