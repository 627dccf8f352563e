"""Water and oil saturation from the Archie equation and a shaly-sand variant."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

_INITIAL_SATURATION = 0.1
_TOLERANCE = 0.001


@dataclass(frozen=True)
class ArchieParameters:
    """Tortuosity ``a``, cementation ``m``, saturation exponent ``n`` and water resistivity ``rw``."""

    a: float
    m: float
    n: float
    rw: float


@dataclass
class SaturationResult:
    """Water and oil saturation at each depth."""

    water: list[float] = field(default_factory=list)
    oil: list[float] = field(default_factory=list)


def archie_saturation(
    resistivity: Sequence[float], porosity: Sequence[float], params: ArchieParameters
) -> SaturationResult:
    """Archie water saturation, capped at 1.0, with oil as its complement."""
    result = SaturationResult()
    for index, rt in enumerate(resistivity):
        denominator = rt * math.pow(porosity[index], params.m)
        if denominator == 0:
            sw = 1.0
        else:
            sw = min(math.pow(params.a * params.rw / denominator, 1.0 / params.n), 1.0)
        result.water.append(sw)
        result.oil.append(1.0 - sw)
    return result


def _iterate(rt: float, phi: float, vsh: float, params: ArchieParameters, rsh: float) -> float:
    s = _INITIAL_SATURATION
    y = 1.0 / rt
    while True:
        s_old = s
        x = math.pow(phi, params.m) * math.pow(s_old, params.n) / (params.a * params.rw)
        s = (x - y) * vsh / rsh
        if not math.isfinite(s):
            raise ValueError("saturation iteration diverged")
        if not (abs(s - s_old) > _TOLERANCE and s > 1.0):
            return s


def modified_archie_saturation(
    resistivity: Sequence[float],
    porosity: Sequence[float],
    shale: Sequence[float],
    params: ArchieParameters,
    rsh: float,
) -> SaturationResult:
    """Shaly-sand water saturation found by fixed-point iteration from 0.1."""
    result = SaturationResult()
    for index, rt in enumerate(resistivity):
        try:
            sw = _iterate(rt, porosity[index], shale[index], params, rsh)
        except OverflowError:
            raise ValueError("saturation iteration diverged") from None
        result.water.append(sw)
        result.oil.append(1.0 - sw)
    return result