import io

import pytest

from huecat.colors.rgb import ANSI_RESET
from huecat.config import RenderConfig
from huecat.render import render_line
from huecat.stream import InputError, StreamDriver, cat_text, existing_paths, iter_lines


def test_iter_lines_strips_terminators():
    stream = io.BytesIO(b"one\ntwo\r\nthree")
    assert list(iter_lines(stream)) == [(0, "one"), (1, "two"), (2, "three")]


def test_iter_lines_skips_undecodable_lines():
    stream = io.BytesIO(b"good\n\xff\xfe bad\nafter\n")
    assert list(iter_lines(stream)) == [(0, "good"), (2, "after")]


def test_iter_lines_decodes_utf8():
    stream = io.BytesIO("héllo ✓\n".encode("utf-8"))
    assert list(iter_lines(stream)) == [(0, "héllo ✓")]


def test_stdin_when_no_sources():
    out = io.StringIO()
    driver = StreamDriver(RenderConfig(no_color=True), out=out, stdin=io.BytesIO(b"a\nb\n"))
    driver.run([])
    assert out.getvalue() == "a\nb\n"


def test_row_index_restarts_per_file(tmp_path):
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_text("x1\nx2\n", encoding="utf-8")
    second.write_text("y1\n", encoding="utf-8")
    config = RenderConfig()

    out = io.StringIO()
    StreamDriver(config, out=out).run([str(first), str(second)])

    expected = (
        render_line("x1", 0, config)
        + render_line("x2", 1, config)
        + render_line("y1", 0, config)
        + ANSI_RESET
    )
    assert out.getvalue() == expected


def test_dash_reads_stdin_between_files(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("file\n", encoding="utf-8")
    out = io.StringIO()
    driver = StreamDriver(RenderConfig(no_color=True), out=out, stdin=io.BytesIO(b"piped\n"))
    driver.run([str(path), "-", str(path)])
    assert out.getvalue() == "file\npiped\nfile\n"


def test_open_failure_abandons_remaining_sources(tmp_path):
    good = tmp_path / "good.txt"
    good.write_text("ok\n", encoding="utf-8")
    out = io.StringIO()
    driver = StreamDriver(RenderConfig(no_color=True), out=out)
    with pytest.raises(InputError):
        driver.run([str(good), str(tmp_path / "missing.txt"), str(good)])
    assert out.getvalue() == "ok\n"


def test_reset_still_written_after_failure(tmp_path):
    out = io.StringIO()
    with pytest.raises(InputError):
        StreamDriver(RenderConfig(), out=out).run([str(tmp_path)])
    assert out.getvalue() == ANSI_RESET


def test_existing_paths(tmp_path):
    present = tmp_path / "present.txt"
    present.write_text("", encoding="utf-8")
    paths = [str(tmp_path / "nope.txt"), str(present), "-", str(tmp_path / "gone")]
    assert existing_paths(paths) == [str(present), "-"]


def test_existing_paths_drops_unusable_names():
    assert existing_paths(["", "x" * 5000, "-"]) == ["-"]


def test_cat_text():
    out = io.StringIO()
    cat_text("first\nsecond\n", RenderConfig(), out=out)
    text = out.getvalue()
    assert text.startswith(render_line("first", 0, RenderConfig()))
    assert text.endswith(render_line("second", 1, RenderConfig()) + ANSI_RESET)
