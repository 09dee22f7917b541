"""Environment-driven configuration."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SEED_CITIES: tuple[tuple[str, str], ...] = (
    ("Vancouver", "America/Vancouver"),
    ("London", "Europe/London"),
    ("Tokyo", "Asia/Tokyo"),
)
DEFAULT_RIPPLE_SECONDS = 0.8


def _default_export_dir() -> Path:
    return Path(tempfile.gettempdir()) / "glorified_clock"


@dataclass(slots=True)
class ClockSettings:
    use_24_hour_format: bool = False
    seed_cities: tuple[tuple[str, str], ...] = DEFAULT_SEED_CITIES
    export_dir: Path = field(default_factory=_default_export_dir)
    ripple_seconds: float = DEFAULT_RIPPLE_SECONDS

    @staticmethod
    def from_env() -> ClockSettings:
        use_24h = os.getenv("GLORIFIED_CLOCK_USE_24H", "").strip().lower() in {"1", "true", "yes", "on"}
        seeds = _parse_seed_cities(os.getenv("GLORIFIED_CLOCK_SEED_CITIES", ""))
        export_raw = os.getenv("GLORIFIED_CLOCK_EXPORT_DIR", "").strip()
        ripple_raw = os.getenv("GLORIFIED_CLOCK_RIPPLE_SECONDS", str(DEFAULT_RIPPLE_SECONDS)).strip()
        try:
            ripple = float(ripple_raw)
        except ValueError:
            ripple = DEFAULT_RIPPLE_SECONDS
        return ClockSettings(
            use_24_hour_format=use_24h,
            seed_cities=seeds or DEFAULT_SEED_CITIES,
            export_dir=Path(export_raw) if export_raw else _default_export_dir(),
            ripple_seconds=max(ripple, 0.0),
        )


def _parse_seed_cities(raw: str) -> tuple[tuple[str, str], ...]:
    # "Vancouver=America/Vancouver;Tokyo=Asia/Tokyo"
    output: list[tuple[str, str]] = []
    for chunk in raw.split(";"):
        name, sep, zone = chunk.partition("=")
        if not sep or not name.strip() or not zone.strip():
            continue
        output.append((name.strip(), zone.strip()))
    return tuple(output)
