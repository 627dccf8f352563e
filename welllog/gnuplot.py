"""Plotting data, files and equations through a gnuplot session."""

from __future__ import annotations

from collections.abc import Sequence

from welllog.gnuplot_session import GnuplotError, GnuplotSession, file_exists


def _fmt(value: float) -> str:
    return f"{value:g}"


def _check_readable(filename: str) -> None:
    if file_exists(filename, 4):
        return
    if not file_exists(filename, 0):
        raise GnuplotError(f'File "{filename}" does not exist')
    raise GnuplotError(f'No read permission for File "{filename}"')


def _check_columns(*columns: Sequence[float]) -> None:
    if any(len(column) == 0 for column in columns):
        raise GnuplotError("vectors too small" if len(columns) > 1 else "vector too small")
    if len({len(column) for column in columns}) > 1:
        raise GnuplotError("Length of the vectors differs")


class Gnuplot(GnuplotSession):
    """A gnuplot session that plots equations, data files and in-memory data."""

    def _plot_prefix(self) -> str:
        return "replot " if self.nplots > 0 and self.two_dim else "plot "

    def _splot_prefix(self) -> str:
        return "replot " if self.nplots > 0 and not self.two_dim else "splot "

    def _title_clause(self, title: str) -> str:
        return " notitle " if title == "" else f' title "{title}" '

    def _style_clause(self) -> str:
        if self.smooth == "":
            return "with " + self.pstyle
        return "smooth " + self.smooth

    def _write_rows(self, rows) -> str:
        name, handle = self._create_tmpfile()
        with handle:
            for row in rows:
                handle.write(" ".join(row) + "\n")
        return name

    def plot_slope(self, a: float, b: float, title: str = "") -> Gnuplot:
        """Plot the line y = a*x + b."""
        line = f"{_fmt(a)} * x + {_fmt(b)}"
        label = f"f(x) = {line}" if title == "" else title
        self.cmd(f'{self._plot_prefix()}{line} title "{label}" with {self.pstyle}')
        return self

    def plot_equation(self, equation: str, title: str = "") -> Gnuplot:
        """Plot y = f(x), given f(x) in gnuplot syntax."""
        label = f"f(x) = {equation}" if title == "" else title
        self.cmd(f'{self._plot_prefix()}{equation} title "{label}" with {self.pstyle}')
        return self

    def plot_equation3d(self, equation: str, title: str = "") -> Gnuplot:
        """Plot the surface z = f(x, y), given f(x, y) in gnuplot syntax."""
        label = f"f(x,y) = {equation}" if title == "" else title
        self.cmd(f'{self._splot_prefix()}{equation} title "{label}" with {self.pstyle}')
        return self

    def plotfile_x(self, filename: str, column: int = 1, title: str = "") -> Gnuplot:
        """Plot one column of a data file."""
        _check_readable(filename)
        self.cmd(
            f'{self._plot_prefix()}"{filename}" using {int(column)}'
            f"{self._title_clause(title)}{self._style_clause()}"
        )
        return self

    def plot_x(self, x: Sequence[float], title: str = "") -> Gnuplot:
        """Plot a list of values against their index."""
        _check_columns(x)
        name = self._write_rows((_fmt(v),) for v in x)
        return self.plotfile_x(name, 1, title)

    def plotfile_xy(
        self, filename: str, column_x: int = 1, column_y: int = 2, title: str = ""
    ) -> Gnuplot:
        """Plot two columns of a data file against each other."""
        _check_readable(filename)
        self.cmd(
            f'{self._plot_prefix()}"{filename}" using {int(column_x)}:{int(column_y)}'
            f"{self._title_clause(title)}{self._style_clause()}"
        )
        return self

    def plot_xy(self, x: Sequence[float], y: Sequence[float], title: str = "") -> Gnuplot:
        """Plot y against x."""
        _check_columns(x, y)
        name = self._write_rows((_fmt(a), _fmt(b)) for a, b in zip(x, y))
        return self.plotfile_xy(name, 1, 2, title)

    def plotfile_xy_err(
        self,
        filename: str,
        column_x: int = 1,
        column_y: int = 2,
        column_dy: int = 3,
        title: str = "",
    ) -> Gnuplot:
        """Plot two columns of a data file with error bars from a third."""
        _check_readable(filename)
        cx, cy, cdy = int(column_x), int(column_y), int(column_dy)
        self.cmd(
            f'{self._plot_prefix()}"{filename}" using {cx}:{cy}'
            f"{self._title_clause(title)}with {self.pstyle}, "
            f'"{filename}" using {cx}:{cy}:{cdy} notitle with errorbars'
        )
        return self

    def plot_xy_err(
        self,
        x: Sequence[float],
        y: Sequence[float],
        dy: Sequence[float],
        title: str = "",
    ) -> Gnuplot:
        """Plot y against x with error bars dy."""
        _check_columns(x, y, dy)
        name = self._write_rows(
            (_fmt(a), _fmt(b), _fmt(c)) for a, b, c in zip(x, y, dy)
        )
        return self.plotfile_xy_err(name, 1, 2, 3, title)

    def plotfile_xyz(
        self,
        filename: str,
        column_x: int = 1,
        column_y: int = 2,
        column_z: int = 3,
        title: str = "",
    ) -> Gnuplot:
        """Plot three columns of a data file in 3D."""
        _check_readable(filename)
        label = " notitle" if title == "" else f' title "{title}"'
        self.cmd(
            f'{self._splot_prefix()}"{filename}" using '
            f"{int(column_x)}:{int(column_y)}:{int(column_z)}{label} with {self.pstyle}"
        )
        return self

    def plot_xyz(
        self,
        x: Sequence[float],
        y: Sequence[float],
        z: Sequence[float],
        title: str = "",
    ) -> Gnuplot:
        """Plot points (x, y, z) in 3D."""
        _check_columns(x, y, z)
        name = self._write_rows(
            (_fmt(a), _fmt(b), _fmt(c)) for a, b, c in zip(x, y, z)
        )
        return self.plotfile_xyz(name, 1, 2, 3, title)

    def plot_image(
        self, pixels: bytes | Sequence[int], width: int, height: int, title: str = ""
    ) -> Gnuplot:
        """Plot a row-major grey-level image of ``width`` by ``height`` pixels."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(pixels) < width * height:
            raise ValueError("pixel buffer is smaller than width * height")
        name = self._write_rows(
            (str(column), str(row), _fmt(float(pixels[row * width + column])))
            for row in range(height)
            for column in range(width)
        )
        if title == "":
            self.cmd(f'{self._plot_prefix()}"{name}" with image')
        else:
            self.cmd(f'{self._plot_prefix()}"{name}" title "{title}" with image')
        return self