"""Timeline service: tracked cities, home reference frame, viewed day and tick."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable

from glorified_clock.settings import DEFAULT_RIPPLE_SECONDS, DEFAULT_SEED_CITIES, ClockSettings
from glorified_clock.timeline.clock import Clock, SystemClock
from glorified_clock.timeline.models import HOURS, City, CityHeader, HourCell, TrackedCity
from glorified_clock.zones.formatting import format_date, format_time, timezone_abbreviation
from glorified_clock.zones.tzmath import (
    DayRelationship,
    add_civil_days,
    civil_hour_of,
    day_relationship,
    hour_slot_instant,
    resolve_timezone_id,
    start_of_day,
    today_in,
)

log = logging.getLogger(__name__)

Scheduler = Callable[[float, Callable[[], None]], object]
HapticCallback = Callable[[], None]


class TimelineService:
    """Owns the tracked cities and the viewed day.

    Deferred work (the ripple clear) goes through ``schedule``. Without one,
    callbacks are queued against the injected clock and run by ``tick()`` on
    the caller's thread.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        seed_cities: tuple[tuple[str, str], ...] = DEFAULT_SEED_CITIES,
        use_24_hour_format: bool = False,
        ripple_seconds: float = DEFAULT_RIPPLE_SECONDS,
        schedule: Scheduler | None = None,
        haptic: HapticCallback | None = None,
    ) -> None:
        if not seed_cities:
            raise ValueError("seed_cities must not be empty")
        self._clock = clock or SystemClock()
        self._pending: list[tuple[datetime, Callable[[], None]]] = []
        self._schedule = schedule or self._defer
        self._haptic = haptic
        self._ripple_seconds = ripple_seconds

        self._cities: list[TrackedCity] = []
        for name, timezone_id in seed_cities:
            self.add_city(name, timezone_id)

        self.use_24_hour_format = use_24_hour_format
        self.show_ripple = False
        self.now: datetime = self._clock.now()
        self.viewed_date: date = today_in(self.home_city.timezone_id, self.now)

    @staticmethod
    def from_settings(
        settings: ClockSettings,
        clock: Clock | None = None,
        schedule: Scheduler | None = None,
        haptic: HapticCallback | None = None,
    ) -> TimelineService:
        return TimelineService(
            clock=clock,
            seed_cities=settings.seed_cities,
            use_24_hour_format=settings.use_24_hour_format,
            ripple_seconds=settings.ripple_seconds,
            schedule=schedule,
            haptic=haptic,
        )

    # -- cities -------------------------------------------------------------

    @property
    def cities(self) -> list[City]:
        return [
            City(city_id=item.city_id, name=item.name, timezone_id=item.timezone_id, is_home=idx == 0)
            for idx, item in enumerate(self._cities)
        ]

    @property
    def home_city(self) -> City:
        return self.cities[0]

    def get_city(self, city_id: str) -> City | None:
        for city in self.cities:
            if city.city_id == city_id:
                return city
        return None

    def add_city(self, name: str, timezone_id: str) -> City | None:
        resolved = resolve_timezone_id(timezone_id)
        if any(item.name == name and item.timezone_id == resolved for item in self._cities):
            return None
        entry = TrackedCity.new(name=name, timezone_id=resolved)
        self._cities.append(entry)
        return City(
            city_id=entry.city_id,
            name=entry.name,
            timezone_id=entry.timezone_id,
            is_home=len(self._cities) == 1,
        )

    def remove_city(self, city_id: str) -> bool:
        index = self._index_of(city_id)
        if index is None or index == 0:
            return False
        del self._cities[index]
        return True

    def set_home(self, city_id: str) -> bool:
        index = self._index_of(city_id)
        if index is None or index == 0:
            return False

        self._trigger_ripple()
        self._trigger_haptic()

        self._cities[0], self._cities[index] = self._cities[index], self._cities[0]
        log.debug("home city is now %s", self._cities[0].name)
        return True

    def _index_of(self, city_id: str) -> int | None:
        for idx, item in enumerate(self._cities):
            if item.city_id == city_id:
                return idx
        return None

    def _trigger_haptic(self) -> None:
        if self._haptic is not None:
            self._haptic()

    def _trigger_ripple(self) -> None:
        self.show_ripple = True
        self._schedule(self._ripple_seconds, self._clear_ripple)

    def _clear_ripple(self) -> None:
        self.show_ripple = False

    def _defer(self, delay_sec: float, callback: Callable[[], None]) -> None:
        self._pending.append((self._clock.now() + timedelta(seconds=delay_sec), callback))

    def _run_due(self) -> None:
        due = [callback for at, callback in self._pending if at <= self.now]
        self._pending = [(at, callback) for at, callback in self._pending if at > self.now]
        for callback in due:
            callback()

    # -- clock and viewed day -----------------------------------------------

    def tick(self) -> datetime:
        self.now = self._clock.now()
        self._run_due()
        return self.now

    def today(self) -> date:
        return today_in(self.home_city.timezone_id, self.now)

    def is_viewing_today(self) -> bool:
        return self.viewed_date == self.today()

    def go_to_today(self) -> date:
        self.viewed_date = self.today()
        return self.viewed_date

    def go_to_previous_day(self) -> date:
        self.viewed_date = add_civil_days(self.viewed_date, -1)
        return self.viewed_date

    def go_to_next_day(self) -> date:
        self.viewed_date = add_civil_days(self.viewed_date, 1)
        return self.viewed_date

    def select_date(self, value: date) -> date:
        if isinstance(value, datetime):
            value = value.date()
        self.viewed_date = value
        return self.viewed_date

    def set_use_24_hour_format(self, enabled: bool) -> None:
        self.use_24_hour_format = bool(enabled)

    def toggle_24_hour_format(self) -> bool:
        self.use_24_hour_format = not self.use_24_hour_format
        return self.use_24_hour_format

    # -- grid -----------------------------------------------------------------

    def grid_anchor(self) -> datetime:
        return start_of_day(self.viewed_date, self.home_city.timezone_id)

    def row_instant(self, hour: int) -> datetime:
        return hour_slot_instant(self.grid_anchor(), hour, self.home_city.timezone_id)

    def current_hour_in_home(self) -> int:
        return civil_hour_of(self.now, self.home_city.timezone_id)

    def is_current_hour_row(self, hour: int) -> bool:
        if not self.is_viewing_today():
            return False
        return hour == self.current_hour_in_home()

    def hour_cells(self, city_id: str) -> list[HourCell]:
        city = self.get_city(city_id)
        if city is None:
            raise KeyError(f"city '{city_id}' not found")
        home_tz = self.home_city.timezone_id
        anchor = self.grid_anchor()
        cells: list[HourCell] = []
        for hour in HOURS:
            instant = hour_slot_instant(anchor, hour, home_tz)
            cells.append(
                HourCell(
                    hour=hour,
                    instant=instant,
                    label=format_time(instant, city.timezone_id, self.use_24_hour_format),
                    is_current=self.is_current_hour_row(hour),
                    relationship=day_relationship(instant, home_tz, instant, city.timezone_id),
                )
            )
        return cells

    def header(self, city_id: str) -> CityHeader:
        city = self.get_city(city_id)
        if city is None:
            raise KeyError(f"city '{city_id}' not found")
        relationship = DayRelationship.SAME
        if not city.is_home:
            relationship = day_relationship(self.now, self.home_city.timezone_id, self.now, city.timezone_id)
        return CityHeader(
            city_id=city.city_id,
            name=city.name,
            is_home=city.is_home,
            abbreviation=timezone_abbreviation(city.timezone_id, self.now),
            date_text=format_date(self.now, city.timezone_id),
            time_text=format_time(self.now, city.timezone_id, self.use_24_hour_format),
            relationship=relationship,
        )

    def headers(self) -> list[CityHeader]:
        return [self.header(city.city_id) for city in self.cities]
