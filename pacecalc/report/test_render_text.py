import pytest

from pacecalc.io.models import Distance, Duration
from pacecalc.report.render_text import USAGE, fmt_pace, fmt_time, render_projection, render_summary


@pytest.mark.parametrize("minutes, expected", [
    (30, "30m"),
    (65, "1h05"),
    (125, "2h05"),
    (120, "2h"),
    (150, "2h30"),
    (59.99, "59m"),
    (0.5, "0m"),
    (189.9, "3h09"),
    (600, "10h"),
])
def test_fmt_time(minutes, expected):
    assert fmt_time(minutes) == expected


def test_fmt_pace_pads_seconds():
    assert fmt_pace((6, 0)) == "6:00"
    assert fmt_pace((9, 39)) == "9:39"


def test_render_summary():
    line = render_summary(Distance(10.0, "k"), Duration(60.0, "1h"), (6, 0), (9, 39))
    assert line == "10.0 km / 6.2 miles in 1h: 6:00/km, 9:39/mile"


def test_render_projection_layout():
    text = render_projection([("Marathon", 189.9), ("Half-Marathon", 94.95), ("10k", 45.0), ("5k", 22.5)])
    assert text.split("\n") == [
        "At that pace:",
        "\tMarathon:\t3h09",
        "\tHalf-Marathon:\t1h34",
        "\t10k:\t\t45m",
        "\t5k:\t\t22m",
    ]


def test_usage_describes_both_modes():
    assert "DISTANCE MODE: `pace 10k 1h`" in USAGE
    assert "PACE MODE: `pace 4:30k`" in USAGE
