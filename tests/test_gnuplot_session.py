import io
import os

import pytest

from welllog.gnuplot_session import (
    GNUPLOT_PROGRAM,
    GnuplotError,
    GnuplotSession,
    default_terminal,
    file_exists,
    find_gnuplot,
)


def make_session(style="points"):
    stream = io.StringIO()
    session = GnuplotSession(style=style, stream=stream, terminal="dumb")
    return session, stream


def lines_after_start(stream):
    return stream.getvalue().splitlines()[2:]


def test_start_selects_terminal():
    _, stream = make_session()
    assert stream.getvalue().splitlines() == ["set output", "set terminal dumb"]


def test_cmd_counts_plots():
    session, _ = make_session()
    session.cmd("plot sin(x)")
    assert session.nplots == 1
    assert session.two_dim is True
    session.cmd("splot x*y")
    assert session.nplots == 2
    assert session.two_dim is False
    session.cmd("replot")
    assert session.nplots == 2


def test_lshift_sends_command():
    session, stream = make_session()
    session << "set grid"
    assert lines_after_start(stream) == ["set grid"]


def test_replot_needs_previous_plot():
    session, stream = make_session()
    session.replot()
    assert lines_after_start(stream) == []
    session.cmd("plot x")
    session.replot()
    assert lines_after_start(stream)[-1] == "replot"


@pytest.mark.parametrize("style, expected", [("lines", "lines"), ("bogus", "points")])
def test_set_style(style, expected):
    session, _ = make_session()
    assert session.set_style(style).pstyle == expected


def test_constructor_style_fallback():
    session, _ = make_session(style="nonsense")
    assert session.pstyle == "points"


def test_set_smooth():
    session, _ = make_session()
    assert session.set_smooth("bezier").smooth == "bezier"
    assert session.set_smooth("wiggly").smooth == ""
    session.set_smooth("csplines")
    assert session.unset_smooth().smooth == ""


def test_savetops_commands():
    session, stream = make_session()
    session.savetops("well")
    assert lines_after_start(stream) == [
        "set terminal postscript color",
        'set output "well.ps"',
    ]


def test_ranges_and_labels():
    session, stream = make_session()
    session.set_xrange(1, 5).set_ylabel("depth").set_cbrange(0, 3)
    assert lines_after_start(stream) == [
        "set xrange[1:5]",
        'set ylabel "depth"',
        "set cbrange[0:3]",
    ]


def test_autoscale_commands():
    session, stream = make_session()
    session.set_zautoscale()
    assert lines_after_start(stream) == ["set zrange restore", "set autoscale z"]


def test_contour_fallback():
    session, stream = make_session()
    session.set_contour("both").set_contour("nowhere")
    assert lines_after_start(stream) == ["set contour both", "set contour base"]


def test_unset_title_sends_empty_title():
    session, stream = make_session()
    session.unset_title()
    assert lines_after_start(stream) == ['set title ""']


def test_reset_all():
    session, stream = make_session()
    session.set_style("lines").set_smooth("bezier")
    session.cmd("plot x")
    session.reset_all()
    assert session.nplots == 0
    assert session.pstyle == "points"
    assert session.smooth == ""
    assert lines_after_start(stream)[-4:] == [
        "reset",
        "clear",
        "set output",
        "set terminal dumb",
    ]


def test_reset_plot_clears_count():
    session, _ = make_session()
    session.cmd("plot x")
    assert session.reset_plot().nplots == 0


def test_close_stops_commands():
    stream = io.StringIO()
    with GnuplotSession(stream=stream, terminal="dumb") as session:
        session.set_grid()
    assert session.valid is False
    before = stream.getvalue()
    session.set_grid()
    assert stream.getvalue() == before


def test_x11_without_display(monkeypatch):
    monkeypatch.delenv("DISPLAY", raising=False)
    with pytest.raises(GnuplotError):
        GnuplotSession(stream=io.StringIO(), terminal="x11")


def test_default_terminal_is_known():
    assert default_terminal() in {"windows", "aqua", "x11"}


def test_file_exists(tmp_path):
    target = tmp_path / "data.txt"
    assert file_exists(str(target), 0) is False
    target.write_text("1\n")
    assert file_exists(str(target), 0) is True
    assert file_exists(str(target), 4) is True


@pytest.mark.parametrize("mode", [-1, 8])
def test_file_exists_bad_mode(tmp_path, mode):
    with pytest.raises(ValueError):
        file_exists(str(tmp_path), mode)


def test_find_gnuplot_in_given_dir(tmp_path):
    program = tmp_path / GNUPLOT_PROGRAM
    program.write_text("")
    program.chmod(0o755)
    found = find_gnuplot(str(tmp_path))
    assert found == f"{tmp_path}/{GNUPLOT_PROGRAM}"


def test_find_gnuplot_in_path(tmp_path, monkeypatch):
    empty = tmp_path / "empty"
    empty.mkdir()
    bindir = tmp_path / "bin"
    bindir.mkdir()
    program = bindir / GNUPLOT_PROGRAM
    program.write_text("")
    program.chmod(0o755)
    monkeypatch.setenv("PATH", os.pathsep.join([str(empty), str(bindir)]))
    assert find_gnuplot(str(empty)) == f"{bindir}/{GNUPLOT_PROGRAM}"


def test_find_gnuplot_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(GnuplotError):
        find_gnuplot(str(tmp_path))


def test_find_gnuplot_without_path(tmp_path, monkeypatch):
    monkeypatch.delenv("PATH", raising=False)
    with pytest.raises(GnuplotError, match="Path is not set"):
        find_gnuplot(str(tmp_path))