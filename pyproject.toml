[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "welllog"
version = "0.1.0"
description = "Well-log interpretation: shale volume, porosity, lithology and Archie water saturation, with a gnuplot session driver"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "well log",
    "petrophysics",
    "gamma ray",
    "porosity",
    "archie",
    "water saturation",
    "gnuplot",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["welllog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
