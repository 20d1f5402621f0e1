"""Test fixtures for space_partitioning tests."""

import math

import pytest
import torch


class Location:
    """Minimal pure-Python entity; no base class, only ``distance_to``.

    Counts distance evaluations so tests can observe pruning.
    """

    def __init__(self, x: float, y: float, label=None):
        self.x = x
        self.y = y
        self.label = label
        self.calls = 0

    def distance_to(self, other) -> float:
        self.calls += 1
        return math.hypot(self.x - other.x, self.y - other.y)

    def __repr__(self):
        return f"Location({self.x}, {self.y})"


def location_x(location: Location) -> float:
    return location.x


def location_y(location: Location) -> float:
    return location.y


@pytest.fixture
def location_dimensions():
    """Ordering dimensions (x, y) for Location entities."""
    return (location_x, location_y)


@pytest.fixture
def make_location():
    """Factory fixture creating Location entities."""
    return Location


@pytest.fixture
def scenario_points():
    """Four points on the diagonal, in a deliberately unsorted order.

    Rows: (0, 0), (5, 5), (9, 9), (1, 1).
    """
    return torch.tensor(
        [[0.0, 0.0], [5.0, 5.0], [9.0, 9.0], [1.0, 1.0]],
        dtype=torch.float64,
    )
