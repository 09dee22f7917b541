from pathlib import Path

from glorified_clock.settings import DEFAULT_SEED_CITIES, ClockSettings


def test_defaults_when_environment_is_empty(monkeypatch) -> None:
    for name in (
        "GLORIFIED_CLOCK_USE_24H",
        "GLORIFIED_CLOCK_SEED_CITIES",
        "GLORIFIED_CLOCK_EXPORT_DIR",
        "GLORIFIED_CLOCK_RIPPLE_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = ClockSettings.from_env()

    assert settings.use_24_hour_format is False
    assert settings.seed_cities == DEFAULT_SEED_CITIES
    assert settings.ripple_seconds == 0.8
    assert settings.export_dir.name == "glorified_clock"


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("GLORIFIED_CLOCK_USE_24H", "true")
    monkeypatch.setenv("GLORIFIED_CLOCK_SEED_CITIES", "Paris=Europe/Paris; Dubai = Asia/Dubai ;broken")
    monkeypatch.setenv("GLORIFIED_CLOCK_EXPORT_DIR", str(tmp_path))
    monkeypatch.setenv("GLORIFIED_CLOCK_RIPPLE_SECONDS", "1.5")

    settings = ClockSettings.from_env()

    assert settings.use_24_hour_format is True
    assert settings.seed_cities == (("Paris", "Europe/Paris"), ("Dubai", "Asia/Dubai"))
    assert settings.export_dir == Path(tmp_path)
    assert settings.ripple_seconds == 1.5


def test_invalid_ripple_seconds_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("GLORIFIED_CLOCK_RIPPLE_SECONDS", "soon")
    monkeypatch.setenv("GLORIFIED_CLOCK_SEED_CITIES", ";;")
    settings = ClockSettings.from_env()
    assert settings.ripple_seconds == 0.8
    assert settings.seed_cities == DEFAULT_SEED_CITIES
