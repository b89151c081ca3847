import json

import pytest

from coordshift.cli import main
from coordshift.config.settings import get_settings


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    for name in ("COORDSHIFT_CONFIG_PATH", "COORDSHIFT_LOG_LEVEL", "COORDSHIFT_PRECISION"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_convert_prints_lng_then_lat(capsys):
    assert main(["convert", "--from", "wgs84", "--to", "bd09", "104.03604907542808", "30.623654551828945"]) == 0

    lng, lat = (float(v) for v in capsys.readouterr().out.split())
    assert lng == pytest.approx(104.0449054907395, abs=1e-9)
    assert lat == pytest.approx(30.627475012958595, abs=1e-9)


def test_convert_json_output(capsys):
    assert main(["convert", "--from", "gcj02", "--to", "gcj02", "--json", "116.404", "39.915"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"system": "GCJ02", "lng": 116.404, "lat": 39.915}


def test_convert_respects_precision(monkeypatch, capsys):
    monkeypatch.setenv("COORDSHIFT_PRECISION", "3")

    main(["convert", "--from", "bd09", "--to", "bd09", "116.40449", "39.91551"])

    assert capsys.readouterr().out.strip() == "116.404 39.916"


def test_convert_accepts_negative_coordinates(capsys):
    main(["convert", "--from", "wgs84", "--to", "gcj02", "-73.9857", "40.7484"])

    # Outside China: unchanged.
    assert capsys.readouterr().out.split() == ["-73.9857", "40.7484"]


def test_convert_rejects_unknown_system(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["convert", "--from", "wgs84", "--to", "utm", "1", "2"])

    assert exc.value.code == 2
    assert "--to" in capsys.readouterr().err


def test_distance_command(capsys):
    assert main(["distance", "--json", "104.070497", "30.588777", "104.070785", "30.581813"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["distance_m"] == pytest.approx(775.7200780129707, rel=1e-6)


def test_region_command(capsys):
    main(["region", "116.404", "39.915"])
    main(["region", "-0.1276", "51.5072"])

    assert capsys.readouterr().out.split() == ["inside", "outside"]


def test_demo_command(capsys):
    assert main(["demo"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("WGS84 (104.03604907542808, 30.623654551828945) -> BD09")
    assert float(lines[1]) == pytest.approx(104.0449054907395, abs=1e-9)
    assert float(lines[2]) == pytest.approx(30.627475012958595, abs=1e-9)
    assert float(lines[3].split(":")[1]) == pytest.approx(775.7200780129707, rel=1e-6)
