import io

from peershare.progress import Progress


def _draw(total, current, width=40):
    buf = io.StringIO()
    Progress(total, width, stream=buf).update(current)
    return buf.getvalue()


def test_zero_total_draws_nothing():
    assert _draw(0, 5) == ""


def test_start_is_empty_bar():
    assert _draw(4, 0, width=10) == "[" + "-" * 10 + "]Percent :0%\r"


def test_half_way():
    out = _draw(4, 2, width=10)
    assert out == "[" + "#" * 5 + "-" * 5 + "]Percent :50%\r"


def test_bar_width_is_constant():
    for current in range(0, 11):
        out = _draw(10, current, width=25)
        bar = out[1 : out.index("]")]
        assert len(bar) == 25
        assert set(bar) <= {"#", "-"}


def test_filled_part_never_shrinks():
    filled = [_draw(7, c, width=30).count("#") for c in range(8)]
    assert filled == sorted(filled)
    assert filled[-1] == 30


def test_single_precision_percent():
    out = _draw(100, 29)
    assert out.endswith("Percent :29%\r")


def test_default_width_and_stdout(capsys):
    Progress(2).update(1)
    out = capsys.readouterr().out
    assert out.count("#") == 20
    assert out.count("-") == 20


def test_finish_draws_full_bar():
    buf = io.StringIO()
    Progress(3, 12, stream=buf).finish()
    assert buf.getvalue() == "[" + "#" * 12 + "]Percent :100%\n\n"