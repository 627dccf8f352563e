"""Well-log profiles: storage, extrema and loading from column data files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import Path

_COLUMNS_PER_ROW = 6

# Extrema are searched against these starting bounds, skipping the first sample.
_MAXIMUM_FLOOR = 0.0
_MINIMUM_CEILING = 1000.0


class ProfileKind(Enum):
    """A log curve and the column it occupies in a six-column data file."""

    DEPTH = 0
    GAMMA_RAY = 1
    RESISTIVITY = 3
    DENSITY = 5

    @property
    def column(self) -> int:
        return self.value


class Profile:
    """A sequence of log readings with its extreme values.

    The extrema ignore the first sample. ``maximum`` is only set when some
    sample exceeds 0.0, and ``minimum`` only when some sample is below 1000.0;
    otherwise they are ``None``.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self.values: list[float] = [float(v) for v in values]
        tail = self.values[1:]
        above = [v for v in tail if v > _MAXIMUM_FLOOR]
        below = [v for v in tail if v < _MINIMUM_CEILING]
        self.maximum: float | None = max(above) if above else None
        self.minimum: float | None = min(below) if below else None

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Profile({self.values!r})"

    def format_data(self) -> str:
        """Return the readings as an indexed listing, one per line."""
        lines = ["Profile values"]
        lines.extend(f"{i}        {value:g}" for i, value in enumerate(self.values))
        return "\n".join(lines)


def parse_profile(text: str, kind: ProfileKind) -> Profile:
    """Extract one curve from whitespace-separated six-column log data."""
    tokens = text.split()
    if len(tokens) % _COLUMNS_PER_ROW:
        raise ValueError(
            f"log data holds {len(tokens)} values, "
            f"not a multiple of {_COLUMNS_PER_ROW} columns"
        )
    try:
        values = [float(tok) for tok in tokens[kind.column :: _COLUMNS_PER_ROW]]
    except ValueError as exc:
        raise ValueError(f"invalid number in log data: {exc}") from None
    return Profile(values)


def read_profile(path: str | Path, kind: ProfileKind) -> Profile:
    """Read one curve from a six-column log data file."""
    return parse_profile(Path(path).read_text(), kind)