"""Well-log interpretation: profiles, shale volume, porosity, lithology, saturation and gnuplot plotting."""

__version__ = "0.1.0"

__all__ = [
    "gnuplot",
    "gnuplot_session",
    "lithology",
    "porosity",
    "profiles",
    "saturation",
    "shale",
]