"""Timeline domain exports."""

from glorified_clock.timeline.clock import Clock, FixedClock, SystemClock
from glorified_clock.timeline.facade import Timeline
from glorified_clock.timeline.models import HOURS, City, CityHeader, HourCell, TrackedCity
from glorified_clock.timeline.service import TimelineService

__all__ = [
    "City",
    "CityHeader",
    "Clock",
    "FixedClock",
    "HOURS",
    "HourCell",
    "SystemClock",
    "Timeline",
    "TimelineService",
    "TrackedCity",
]
