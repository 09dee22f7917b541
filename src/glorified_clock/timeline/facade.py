"""Timeline public facade."""

from __future__ import annotations

from datetime import date, datetime

from glorified_clock.timeline.models import City, CityHeader, HourCell
from glorified_clock.timeline.service import TimelineService


class Timeline:
    def __init__(self, service: TimelineService | None = None) -> None:
        self._service = service or TimelineService()

    @property
    def service(self) -> TimelineService:
        return self._service

    def cities(self) -> list[City]:
        return self._service.cities

    def home(self) -> City:
        return self._service.home_city

    def add_city(self, name: str, timezone_id: str) -> City | None:
        return self._service.add_city(name=name, timezone_id=timezone_id)

    def remove_city(self, city_id: str) -> bool:
        return self._service.remove_city(city_id)

    def set_home(self, city_id: str) -> bool:
        return self._service.set_home(city_id)

    def tick(self) -> datetime:
        return self._service.tick()

    def go_to_today(self) -> date:
        return self._service.go_to_today()

    def go_to_previous_day(self) -> date:
        return self._service.go_to_previous_day()

    def go_to_next_day(self) -> date:
        return self._service.go_to_next_day()

    def select_date(self, value: date) -> date:
        return self._service.select_date(value)

    def grid_anchor(self) -> datetime:
        return self._service.grid_anchor()

    def is_current_hour_row(self, hour: int) -> bool:
        return self._service.is_current_hour_row(hour)

    def hour_cells(self, city_id: str) -> list[HourCell]:
        return self._service.hour_cells(city_id)

    def headers(self) -> list[CityHeader]:
        return self._service.headers()
