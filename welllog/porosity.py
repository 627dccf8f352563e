"""Porosity from the density log and its average over a depth interval."""

from __future__ import annotations

from collections.abc import Sequence

from welllog.profiles import Profile

_POROSITY_AT_MAXIMUM = 0.05


def density_porosity(density: Profile) -> list[float]:
    """Return the porosity at each reading of a density profile."""
    low, high = density.minimum, density.maximum
    if low is None or high is None:
        raise ValueError("density profile has no defined extrema")
    span = high - low
    result = []
    for value in density:
        if value == high:
            result.append(_POROSITY_AT_MAXIMUM)
        elif span == 0:
            raise ValueError("density profile has no range")
        else:
            result.append((high - value) / span)
    return result


def mean_porosity(
    porosity: Sequence[float], depth: Sequence[float], top: float, bottom: float
) -> float:
    """Average porosity from the first sample below ``top`` down to ``bottom``.

    Samples are taken from the first depth greater than ``top`` (or the first
    sample if none is) up to and including the first one at or below ``bottom``.
    """
    start = next((i for i, d in enumerate(depth) if d > top), 0)
    total = 0.0
    count = 0
    for index in range(start, min(len(porosity), len(depth))):
        total += porosity[index]
        count += 1
        if depth[index] >= bottom:
            return total / count
    raise ValueError(f"depth {bottom} lies past the end of the log")