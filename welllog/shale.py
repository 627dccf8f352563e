"""Shale volume estimates from the gamma-ray log."""

from __future__ import annotations

from enum import Enum

from welllog.profiles import Profile


class ShaleMethod(Enum):
    """Correlation used to turn the gamma-ray index into shale volume."""

    PRACTICAL = "practical"
    CONSOLIDATED = "consolidated"
    UNCONSOLIDATED = "unconsolidated"


def gamma_ray_index(gamma_ray: Profile) -> list[float]:
    """Return the linear gamma-ray index of every reading."""
    low, high = gamma_ray.minimum, gamma_ray.maximum
    if low is None or high is None:
        raise ValueError("gamma-ray profile has no defined extrema")
    span = high - low
    if span == 0:
        raise ValueError("gamma-ray profile has no range")
    return [(value - low) / span for value in gamma_ray]


def _correct(index: float, method: ShaleMethod) -> float:
    if method is ShaleMethod.PRACTICAL:
        return index
    if method is ShaleMethod.CONSOLIDATED:
        return 0.33 * (2 ** (2 * index) - 1)
    return 0.083 * 2 ** (3.7 * index) - 0.083


def shale_volume(gamma_ray: Profile, method: ShaleMethod) -> list[float]:
    """Return the shale volume at each reading using the given correlation."""
    method = ShaleMethod(method)
    return [_correct(index, method) for index in gamma_ray_index(gamma_ray)]