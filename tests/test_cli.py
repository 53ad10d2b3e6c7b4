"""Tests for the suntimes command line."""

import pytest

from suntimes import cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda settings=None: None)


def test_slug_and_date(capsys):
    assert cli.main(["new-york-ny", "--date", "2024-06-21"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("New York, New York")
    assert "2024-06-21 (America/New_York)" in out
    assert "Sunrise" in out
    assert "5:2" in out
    assert "Nearby locations" in out
    assert "Newark" in out


def test_korean_output(capsys):
    assert cli.main(["london-uk", "--date", "2024-12-21", "--lang", "ko"]) == 0
    assert "일출" in capsys.readouterr().out


def test_polar_location_prints_message(capsys):
    assert cli.main(["longyearbyen-no", "--date", "2024-06-21"]) == 0
    assert "The sun does not set on this date" in capsys.readouterr().out


def test_unknown_slug(capsys):
    assert cli.main(["atlantis-xx"]) == 2
    assert "Unknown location: atlantis-xx" in capsys.readouterr().err


def test_near_out_of_range(capsys):
    assert cli.main(["--near", "999", "0"]) == 2
    assert "Invalid coordinates" in capsys.readouterr().err


def test_near_bad_format():
    with pytest.raises(SystemExit):
        cli.main(["--near", "north", "0"])


def test_near_resolves_nearest(capsys):
    assert cli.main(["--near", "40.0", "-74.0", "--date", "2024-06-21"]) == 0
    out = capsys.readouterr().out
    assert "Nearest location: New York, New York" in out


def test_near_accepts_negative_latitude(capsys):
    assert cli.main(["--near", "-33.9", "151.2", "--date", "2024-12-21"]) == 0
    assert "Nearest location: Sydney" in capsys.readouterr().out


def test_date_outside_ephemeris(capsys):
    assert cli.main(["new-york-ny", "--date", "2200-01-01"]) == 2
    assert "Date out of range (2200-01-01" in capsys.readouterr().err


class TestSearch:
    def test_lists_matches_without_computing(self, capsys):
        assert cli.main(["--search", "new"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("new-york-ny")
        assert lines[1].startswith("newark-nj")
        assert lines[0].endswith("New York, New York")

    def test_no_matches(self, capsys):
        assert cli.main(["--search", "zzzz"]) == 0
        assert capsys.readouterr().out.strip() == "No matching locations."


def test_month_table(capsys):
    assert cli.main(["tokyo-jp", "--date", "2024-02-10", "--month"]) == 0
    out = capsys.readouterr().out
    assert "2024-02-01" in out
    assert "2024-02-29" in out
    assert "Typical day length at this latitude: 9-15 h (longest in June, shortest in December)" in out


def test_month_svg(capsys, tmp_path):
    path = tmp_path / "charts" / "tokyo.svg"
    assert cli.main(["tokyo-jp", "--date", "2024-02-10", "--month", "--svg", str(path)]) == 0

    svg = path.read_text(encoding="utf-8")
    assert svg.startswith("<svg")
    assert 'aria-label="Daylight (hours) chart for February in Tokyo, Tokyo"' in svg
    assert f"Saved: {path}" in capsys.readouterr().out


def test_svg_requires_month():
    with pytest.raises(SystemExit):
        cli.main(["tokyo-jp", "--svg", "out.svg"])


def test_requires_location():
    with pytest.raises(SystemExit):
        cli.main([])
