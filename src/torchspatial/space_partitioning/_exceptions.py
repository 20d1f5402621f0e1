"""Space partitioning module exceptions."""


class SpacePartitioningError(Exception):
    """Base exception for space partitioning structures."""

    pass


class EmptyOrderingDimensionsError(SpacePartitioningError):
    """No ordering dimensions were supplied to split along."""

    pass
