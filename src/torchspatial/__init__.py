"""torchspatial: exact nearest-neighbor search over spatial entities."""

from . import space_partitioning

__all__ = [
    "space_partitioning",
]

__version__ = "0.1.0"
