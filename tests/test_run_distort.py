import pytest

from windwarp import run_distort
from windwarp.config import DistortionConfig


def test_run_distort_reports_result(capsys):
    pt, wind = run_distort.run_distort(53.5444, -113.4909, 10.0, 10.0)
    out = capsys.readouterr().out

    assert "canvas:" in out and "vector:" in out
    assert 0.0 <= pt.x <= 360.0 and 0.0 <= pt.y <= 180.0
    # north of the equator the meridian scale stretches the eastward part
    assert wind.u > 10.0


def test_run_distort_checked_rejects_pole():
    with pytest.raises(ValueError):
        run_distort.run_distort(90.0, 0.0, 1.0, 1.0, cfg=DistortionConfig(checked=True))


def test_main_reads_environment(monkeypatch, capsys):
    monkeypatch.setenv("LAT", "0")
    monkeypatch.setenv("LNG", "0")
    monkeypatch.setenv("U", "1")
    monkeypatch.setenv("V", "0")
    monkeypatch.setenv("METHOD", "analytic")

    run_distort.main()
    out = capsys.readouterr().out
    assert "x=180.000 y=90.000" in out
    assert "(analytic)" in out
