"""BranchSelectionPolicy — pick the nearest active branch to a customer."""

from __future__ import annotations

from dataclasses import dataclass

from kebabish_geo.domain.entities.branch import Branch
from kebabish_geo.domain.value_objects.geo_point import GeoPoint, calculate_distance


@dataclass(frozen=True)
class BranchSelection:
    """Result of the branch selection policy."""

    branch: Branch
    distance_km: float
    reason: str


def select_nearest_branch(
    customer_location: GeoPoint,
    branches: list[Branch],
) -> BranchSelection:
    """Select the geographically nearest active branch that has a known location.

    Args:
        customer_location: geocoded point of the customer.
        branches: candidate branches (inactive or unlocated ones are skipped).

    Returns:
        BranchSelection with the nearest branch and its rounded distance.

    Raises:
        ValueError: if no active branch has a known location.
    """
    candidates = [
        (
            b,
            calculate_distance(
                customer_location.latitude,
                customer_location.longitude,
                b.location.latitude,
                b.location.longitude,
            ),
        )
        for b in branches
        if b.is_active and b.location
    ]
    if not candidates:
        raise ValueError("No active branches with known locations available")

    best_branch, best_distance = min(candidates, key=lambda x: x[1])
    return BranchSelection(
        branch=best_branch,
        distance_km=best_distance,
        reason=f"Nearest branch: {best_branch.name} ({best_distance:.1f} km)",
    )
