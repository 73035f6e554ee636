import pytest

from ui.session_summary import chart_ceiling


@pytest.mark.parametrize(
    "wpm, best, expected",
    [(0, 0, 115.0), (40, 80, 115.0), (120, 90, 138.0), (60, 200, 230.0)],
)
def test_chart_leaves_headroom(wpm, best, expected):
    assert chart_ceiling(wpm, best) == pytest.approx(expected)
