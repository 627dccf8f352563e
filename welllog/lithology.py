"""Lithology classification from gamma-ray cut-offs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

_CARBONATE_LIMIT = 30.0
_SHALE_LIMIT = 90.0


class Lithology(Enum):
    CARBONATE = "carbonate"
    SANDSTONE = "sandstone"
    SHALE = "shale"


@dataclass
class LithologyLog:
    """Gamma-ray readings and their depths, grouped by lithology."""

    carbonate_gamma: list[float] = field(default_factory=list)
    carbonate_depth: list[float] = field(default_factory=list)
    sandstone_gamma: list[float] = field(default_factory=list)
    sandstone_depth: list[float] = field(default_factory=list)
    shale_gamma: list[float] = field(default_factory=list)
    shale_depth: list[float] = field(default_factory=list)


def classify_value(value: float, carbonates: bool) -> Lithology:
    """Classify one gamma-ray reading.

    Without carbonates, readings below 90 are sandstone and the rest shale.
    With carbonates, readings below 30 are carbonate and up to 90 sandstone.
    """
    if carbonates:
        if value < _CARBONATE_LIMIT:
            return Lithology.CARBONATE
        if value <= _SHALE_LIMIT:
            return Lithology.SANDSTONE
        return Lithology.SHALE
    return Lithology.SANDSTONE if value < _SHALE_LIMIT else Lithology.SHALE


def identify_lithologies(
    gamma_ray: Sequence[float], depth: Sequence[float], carbonates: bool
) -> LithologyLog:
    """Split the gamma-ray log into lithologies, keeping each reading's depth."""
    if len(depth) < len(gamma_ray):
        raise ValueError("depth log is shorter than the gamma-ray log")
    log = LithologyLog()
    for value, where in zip(gamma_ray, depth):
        kind = classify_value(value, carbonates)
        if kind is Lithology.CARBONATE:
            log.carbonate_gamma.append(value)
            log.carbonate_depth.append(where)
        elif kind is Lithology.SANDSTONE:
            log.sandstone_gamma.append(value)
            log.sandstone_depth.append(where)
        else:
            log.shale_gamma.append(value)
            log.shale_depth.append(where)
    return log