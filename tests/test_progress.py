import io

import pytest

from zsynckit.progress import Outcome, Progress, progress_bar


class _Clock:
    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        return self.times.pop(0)


def _bar(line):
    return line.lstrip("\r").split(" ")[0]


@pytest.mark.parametrize("chars", [-3, 0, 1, 7, 20, 35])
def test_progress_bar_shape(chars):
    line = progress_bar(chars, 42.0)
    bar = _bar(line)
    assert line.startswith("\r")
    assert len(bar) == 20
    assert bar.count("#") == max(0, min(chars, 20))
    assert bar == "#" * bar.count("#") + "-" * bar.count("-")
    assert line.endswith(" 42.0%")


def test_progress_bar_full():
    assert progress_bar(20, 100.0) == "\r" + "#" * 20 + " 100.0%"


def test_first_update_draws_bar_only():
    out = io.StringIO()
    progress = Progress(stream=out, clock=_Clock(100))
    progress.update(50.0, 1000)
    assert out.getvalue() == progress_bar(10, 50.0)
    assert progress.start_time == 100
    assert progress.last_downloaded == 1000


def test_update_within_same_second_is_ignored():
    out = io.StringIO()
    progress = Progress(stream=out, clock=_Clock(100, 100))
    progress.update(10.0, 0)
    first = out.getvalue()
    progress.update(20.0, 5000)
    assert out.getvalue() == first
    assert progress.last_percent == 10.0


def test_update_after_one_second_shows_rate_and_eta():
    out = io.StringIO()
    progress = Progress(stream=out, clock=_Clock(100, 101))
    progress.update(10.0, 0)
    progress.update(20.0, 5000)
    text = out.getvalue()
    assert " 5.0 kBps " in text
    assert text.endswith(" ETA  ")
    assert progress.last_time == 101


def test_update_without_progress_prints_blank_eta():
    out = io.StringIO()
    progress = Progress(stream=out, clock=_Clock(100, 102))
    progress.update(10.0, 0)
    progress.update(10.0, 4000)
    text = out.getvalue()
    assert "kBps" in text
    assert "ETA" not in text
    assert text.endswith("        \n")


def test_end_done():
    out = io.StringIO()
    progress = Progress(stream=out, clock=_Clock(100))
    progress.update(30.0, 0)
    out.truncate(0)
    out.seek(0)
    progress.end(Outcome.DONE)
    text = out.getvalue()
    assert text.startswith(progress_bar(20, 100.0))
    assert text.endswith("DONE    \n\n")


def test_end_aborted_keeps_last_percent():
    out = io.StringIO()
    progress = Progress(stream=out, clock=_Clock(100))
    progress.update(40.0, 0)
    out.truncate(0)
    out.seek(0)
    progress.end(Outcome.ABORTED)
    text = out.getvalue()
    assert text.startswith(progress_bar(8, 40.0))
    assert text.endswith("aborted    \n\n")


def test_end_incomplete_accepts_int():
    out = io.StringIO()
    progress = Progress(stream=out, clock=_Clock(100))
    progress.update(40.0, 0)
    progress.end(1)
    assert out.getvalue().endswith(" kBps         \n\n")
    assert "DONE" not in out.getvalue()


def test_end_rejects_unknown_outcome():
    progress = Progress(stream=io.StringIO(), clock=_Clock())
    with pytest.raises(ValueError):
        progress.end(7)