"""A command session with a gnuplot process: settings, state and temporary files."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from contextlib import suppress
from typing import IO

_WINDOWS = sys.platform.startswith("win")

GNUPLOT_PROGRAM = "pgnuplot.exe" if _WINDOWS else "gnuplot"
DEFAULT_GNUPLOT_DIR = "C:/program files/gnuplot/bin/" if _WINDOWS else "/usr/bin/"
MAX_TMP_FILES = 27 if _WINDOWS else 64

_STYLES = (
    "lines",
    "points",
    "linespoints",
    "impulses",
    "dots",
    "steps",
    "fsteps",
    "histeps",
    "boxes",
    "filledcurves",
    "histograms",
)
_SMOOTHINGS = ("unique", "frequency", "csplines", "acsplines", "bezier", "sbezier")
_CONTOURS = ("base", "surface", "both")


class GnuplotError(Exception):
    """Raised when gnuplot cannot be found, started or fed."""


def _num(value: float) -> str:
    return f"{value:g}"


def file_exists(filename: str, mode: int = 0) -> bool:
    """Tell whether ``filename`` is accessible in ``mode`` (0 exists, 1 x, 2 w, 4 r)."""
    if not 0 <= mode <= 7:
        raise ValueError("mode has to be an integer between 0 and 7")
    return os.access(filename, mode)


def _is_program(filename: str) -> bool:
    return file_exists(filename, 0 if _WINDOWS else 1)


def find_gnuplot(path: str | None = None) -> str:
    """Return the gnuplot executable, looked for in ``path`` first, then in PATH."""
    directory = DEFAULT_GNUPLOT_DIR if path is None else path
    candidate = f"{directory}/{GNUPLOT_PROGRAM}"
    if _is_program(candidate):
        return candidate
    search = os.environ.get("PATH")
    if search is None:
        raise GnuplotError("Path is not set")
    for entry in filter(None, search.split(os.pathsep)):
        candidate = f"{entry}/{GNUPLOT_PROGRAM}"
        if _is_program(candidate):
            return candidate
    raise GnuplotError(f'Can\'t find gnuplot neither in PATH nor in "{directory}"')


def default_terminal() -> str:
    """The on-screen terminal for this platform."""
    if _WINDOWS:
        return "windows"
    if sys.platform == "darwin":
        return "aqua"
    return "x11"


class GnuplotSession:
    """Sends commands to gnuplot and tracks plot state.

    Commands go to ``stream`` when one is given; otherwise a gnuplot process
    is started, found in ``path`` or in PATH.
    """

    _tmpfile_count = 0

    def __init__(
        self,
        style: str = "points",
        stream: IO[str] | None = None,
        path: str | None = None,
        terminal: str | None = None,
    ) -> None:
        self.valid = False
        self.nplots = 0
        self.two_dim = False
        self.pstyle = "points"
        self.smooth = ""
        self._tmpfiles: list[str] = []
        self._process: subprocess.Popen | None = None

        if terminal is None:
            terminal = default_terminal()
        elif "x11" in terminal and os.environ.get("DISPLAY") is None:
            raise GnuplotError("Can't find DISPLAY variable")
        self.terminal = terminal

        if stream is None:
            stream = self._spawn(path)
        self._stream = stream
        self.valid = True
        self.showonscreen()
        self.set_style(style)

    def _spawn(self, path: str | None) -> IO[str]:
        if os.name == "posix" and sys.platform != "darwin" and os.environ.get("DISPLAY") is None:
            raise GnuplotError("Can't find DISPLAY variable")
        program = find_gnuplot(path)
        try:
            self._process = subprocess.Popen([program], stdin=subprocess.PIPE, text=True)
        except OSError as exc:
            raise GnuplotError("Couldn't open connection to gnuplot") from exc
        return self._process.stdin

    def _create_tmpfile(self) -> tuple[str, IO[str]]:
        """Open a new temporary data file owned by this session."""
        if GnuplotSession._tmpfile_count >= MAX_TMP_FILES - 1:
            raise GnuplotError(
                f"Maximum number of temporary files reached ({MAX_TMP_FILES}): "
                "cannot open more files"
            )
        directory = os.getcwd() if _WINDOWS else None
        try:
            fd, name = tempfile.mkstemp(prefix="gnuploti", dir=directory)
        except OSError as exc:
            raise GnuplotError(f'Cannot create temporary file "{exc.filename}"') from exc
        self._tmpfiles.append(name)
        GnuplotSession._tmpfile_count += 1
        return name, os.fdopen(fd, "w")

    def _remove_tmpfiles(self) -> None:
        for name in self._tmpfiles:
            with suppress(FileNotFoundError):
                os.remove(name)
        GnuplotSession._tmpfile_count -= len(self._tmpfiles)
        self._tmpfiles.clear()

    def close(self) -> None:
        """Delete temporary files and end the gnuplot connection."""
        self._remove_tmpfiles()
        if not self.valid:
            return
        self.valid = False
        if self._process is not None:
            try:
                self._process.stdin.close()
                self._process.wait()
            except OSError as exc:
                raise GnuplotError("Problem closing communication to gnuplot") from exc
        else:
            self._stream.flush()

    def __enter__(self) -> GnuplotSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def cmd(self, command: str) -> GnuplotSession:
        """Send one command line to gnuplot."""
        if not self.valid:
            return self
        self._stream.write(command + "\n")
        self._stream.flush()
        if "replot" in command:
            return self
        if "splot" in command:
            self.two_dim = False
            self.nplots += 1
        elif "plot" in command:
            self.two_dim = True
            self.nplots += 1
        return self

    def __lshift__(self, command: str) -> GnuplotSession:
        return self.cmd(command)

    def reset_plot(self) -> GnuplotSession:
        """Forget earlier plots so the next one starts afresh."""
        self._remove_tmpfiles()
        self.nplots = 0
        return self

    def reset_all(self) -> GnuplotSession:
        """Reset gnuplot and this session to their defaults."""
        self._remove_tmpfiles()
        self.nplots = 0
        self.cmd("reset")
        self.cmd("clear")
        self.pstyle = "points"
        self.smooth = ""
        self.showonscreen()
        return self

    def replot(self) -> GnuplotSession:
        if self.nplots > 0:
            self.cmd("replot")
        return self

    def set_style(self, style: str = "points") -> GnuplotSession:
        """Set the plotting style; unknown styles fall back to points."""
        self.pstyle = style if any(s in style for s in _STYLES) else "points"
        return self

    def set_smooth(self, style: str = "csplines") -> GnuplotSession:
        """Set data smoothing; unknown methods switch it off."""
        self.smooth = style if any(s in style for s in _SMOOTHINGS) else ""
        return self

    def unset_smooth(self) -> GnuplotSession:
        self.smooth = ""
        return self

    def showonscreen(self) -> GnuplotSession:
        self.cmd("set output")
        self.cmd("set terminal " + self.terminal)
        return self

    def savetops(self, filename: str = "gnuplot_output") -> GnuplotSession:
        self.cmd("set terminal postscript color")
        self.cmd(f'set output "{filename}.ps"')
        return self

    def set_legend(self, position: str = "default") -> GnuplotSession:
        return self.cmd(f"set key {position}")

    def unset_legend(self) -> GnuplotSession:
        return self.cmd("unset key")

    def set_grid(self) -> GnuplotSession:
        return self.cmd("set grid")

    def unset_grid(self) -> GnuplotSession:
        return self.cmd("unset grid")

    def set_xlogscale(self, base: float = 10) -> GnuplotSession:
        return self.cmd(f"set logscale x {_num(base)}")

    def set_ylogscale(self, base: float = 10) -> GnuplotSession:
        return self.cmd(f"set logscale y {_num(base)}")

    def set_zlogscale(self, base: float = 10) -> GnuplotSession:
        return self.cmd(f"set logscale z {_num(base)}")

    def unset_xlogscale(self) -> GnuplotSession:
        return self.cmd("unset logscale x")

    def unset_ylogscale(self) -> GnuplotSession:
        return self.cmd("unset logscale y")

    def unset_zlogscale(self) -> GnuplotSession:
        return self.cmd("unset logscale z")

    def set_pointsize(self, pointsize: float = 1.0) -> GnuplotSession:
        return self.cmd(f"set pointsize {_num(pointsize)}")

    def set_samples(self, samples: int = 100) -> GnuplotSession:
        return self.cmd(f"set samples {int(samples)}")

    def set_isosamples(self, isolines: int = 10) -> GnuplotSession:
        return self.cmd(f"set isosamples {int(isolines)}")

    def set_hidden3d(self) -> GnuplotSession:
        return self.cmd("set hidden3d")

    def unset_hidden3d(self) -> GnuplotSession:
        return self.cmd("unset hidden3d")

    def set_contour(self, position: str = "base") -> GnuplotSession:
        """Draw contours at base, surface or both; anything else means base."""
        if not any(p in position for p in _CONTOURS):
            position = "base"
        return self.cmd("set contour " + position)

    def unset_contour(self) -> GnuplotSession:
        return self.cmd("unset contour")

    def set_surface(self) -> GnuplotSession:
        return self.cmd("set surface")

    def unset_surface(self) -> GnuplotSession:
        return self.cmd("unset surface")

    def set_title(self, title: str = "") -> GnuplotSession:
        return self.cmd(f'set title "{title}"')

    def unset_title(self) -> GnuplotSession:
        return self.set_title("")

    def set_xlabel(self, label: str = "x") -> GnuplotSession:
        return self.cmd(f'set xlabel "{label}"')

    def set_ylabel(self, label: str = "y") -> GnuplotSession:
        return self.cmd(f'set ylabel "{label}"')

    def set_zlabel(self, label: str = "z") -> GnuplotSession:
        return self.cmd(f'set zlabel "{label}"')

    def set_xrange(self, start: int, stop: int) -> GnuplotSession:
        return self.cmd(f"set xrange[{int(start)}:{int(stop)}]")

    def set_yrange(self, start: int, stop: int) -> GnuplotSession:
        return self.cmd(f"set yrange[{int(start)}:{int(stop)}]")

    def set_zrange(self, start: int, stop: int) -> GnuplotSession:
        return self.cmd(f"set zrange[{int(start)}:{int(stop)}]")

    def set_xautoscale(self) -> GnuplotSession:
        self.cmd("set xrange restore")
        return self.cmd("set autoscale x")

    def set_yautoscale(self) -> GnuplotSession:
        self.cmd("set yrange restore")
        return self.cmd("set autoscale y")

    def set_zautoscale(self) -> GnuplotSession:
        self.cmd("set zrange restore")
        return self.cmd("set autoscale z")

    def set_cbrange(self, start: int, stop: int) -> GnuplotSession:
        return self.cmd(f"set cbrange[{int(start)}:{int(stop)}]")