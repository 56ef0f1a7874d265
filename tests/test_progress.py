import io

from genomemaker.vis import ProgressBar


def test_progress_bar_reaches_100_percent():
    out = io.StringIO()
    bar = ProgressBar(200, width=20, out=out)
    bar.advance(50)
    assert " 25%" in out.getvalue()
    assert not bar.finished
    bar.advance(150)
    bar.close()
    assert bar.finished
    assert "100%" in out.getvalue()
    assert out.getvalue().endswith("\n")


def test_progress_bar_does_not_overshoot():
    bar = ProgressBar(10, width=10, out=io.StringIO())
    bar.advance(25)
    assert bar.done == 10


def test_progress_bar_layout():
    bar = ProgressBar(4, width=8, out=io.StringIO())
    bar.advance(2)
    assert str(bar) == "[====>   ]  50%"
