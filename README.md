# welllog

Tools for interpreting well logs: reading profile columns from a
six-column log file, computing shale volume from gamma ray, porosity
from density, a gamma-ray lithology split, and water saturation by the
Archie and modified Archie equations. A small driver for a gnuplot
process is included for plotting the results.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Log files

A log file holds whitespace-separated numbers, six per depth sample.
Columns are read as:

| column | profile      | `ProfileKind`  |
|--------|--------------|----------------|
| 1      | depth        | `DEPTH`        |
| 2      | gamma ray    | `GAMMA_RAY`    |
| 4      | resistivity  | `RESISTIVITY`  |
| 6      | density      | `DENSITY`      |

```python
from welllog.profiles import ProfileKind, read_profile

depth = read_profile("well.txt", ProfileKind.DEPTH)
gamma = read_profile("well.txt", ProfileKind.GAMMA_RAY)
density = read_profile("well.txt", ProfileKind.DENSITY)
resistivity = read_profile("well.txt", ProfileKind.RESISTIVITY)

print(len(gamma), gamma[0])
print(gamma.format_data())
```

`parse_profile(text, kind)` does the same from a string. Both raise
`ValueError` when the number of values is not a multiple of six or a
value is not a number.

A `Profile` holds its readings in `values` and supports `len()`,
indexing and iteration. Its `maximum` and `minimum` are searched
skipping the first sample: `maximum` is the largest later reading above
0.0 and `minimum` the smallest later reading below 1000.0; either is
`None` when no reading qualifies.

## Shale volume

```python
from welllog.shale import ShaleMethod, gamma_ray_index, shale_volume

igr = gamma_ray_index(gamma)
vsh = shale_volume(gamma, ShaleMethod.CONSOLIDATED)
```

`gamma_ray_index` scales each reading linearly between the profile's
minimum and maximum. `shale_volume` applies one of three correlations:

- `ShaleMethod.PRACTICAL`: the index itself
- `ShaleMethod.CONSOLIDATED`: `0.33 * (2 ** (2 * I) - 1)`
- `ShaleMethod.UNCONSOLIDATED`: `0.083 * 2 ** (3.7 * I) - 0.083`

A `ValueError` is raised when the profile has no extrema or no range.

## Porosity

```python
from welllog.porosity import density_porosity, mean_porosity

phi = density_porosity(density)
average = mean_porosity(phi, depth, 1000.0, 1050.0)
```

`density_porosity` gives `(max - value) / (max - min)` at each reading,
and 0.05 where the reading equals the maximum. `mean_porosity` averages
from the first sample deeper than the top down to and including the
first sample at or below the bottom; it raises `ValueError` if the
bottom lies past the end of the log.

## Lithology

```python
from welllog.lithology import identify_lithologies

log = identify_lithologies(gamma, depth, carbonates=True)
print(log.sandstone_depth, log.shale_depth, log.carbonate_depth)
```

Samples are split into sandstone and shale at a gamma-ray reading of
90; with `carbonates=True`, readings below 30 are classed as carbonate
and readings up to and including 90 as sandstone.
`classify_value(value, carbonates)` classifies a single reading and
returns a `Lithology` member. The returned `LithologyLog` keeps the
gamma-ray readings and depths of each class in separate lists.

## Water saturation

```python
from welllog.saturation import (
    ArchieParameters,
    archie_saturation,
    modified_archie_saturation,
)

params = ArchieParameters(a=1.0, m=2.0, n=2.0, rw=0.05)
result = archie_saturation(resistivity, phi, params)
shaly = modified_archie_saturation(resistivity, phi, vsh, params, rsh=4.0)
```

Each `SaturationResult` holds `water` and `oil` (one minus water) for
every sample. The Archie saturation is capped at 1.0. The modified
equation is solved by fixed-point iteration starting at 0.1; a
`ValueError` is raised if the iteration diverges.

## Plotting

`GnuplotSession` sends commands to gnuplot and keeps track of plot
state; `Gnuplot` adds plotting of data series, equations, data files and
grey-level images. Without a `stream` argument a gnuplot process is
started, looked for first in the directory given by `path` (by default
`/usr/bin/`, or the gnuplot directory under Program Files on Windows)
and then on `PATH`. On Linux and other Unix systems other than macOS a
`DISPLAY` variable is required to start it. Pass any writable text
stream as `stream` to collect the commands instead.

```python
from welllog.gnuplot import Gnuplot

with Gnuplot("lines") as plot:
    plot.set_xlabel("shale volume").set_ylabel("depth")
    plot.plot_xy(list(vsh), list(depth), "Vsh")
```

Setting methods return the session, so calls can be chained;
`plot << "set grid"` sends a raw command. In-memory data is written to
temporary files, which are deleted by `reset_plot`, `reset_all` or
`close` (also called on leaving a `with` block). Errors from gnuplot
handling are raised as `GnuplotError`.

## What is not included

The package is a library only. It has no command-line program or
interactive menu: log files, model coefficients and depth intervals are
passed to the functions as arguments, and plots are made by calling the
`Gnuplot` methods from your own code.