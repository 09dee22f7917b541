"""FastAPI request/response schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field


class CityPayload(BaseModel):
    city_id: str
    name: str
    timezone_id: str
    is_home: bool


class AddCityRequest(BaseModel):
    name: str = Field(min_length=1)
    timezone_id: str = Field(min_length=1)


class AddCityResponse(BaseModel):
    added: bool
    city: CityPayload | None = None


class CityListResponse(BaseModel):
    cities: list[CityPayload]


class MutationResponse(BaseModel):
    changed: bool


class HourCellPayload(BaseModel):
    hour: int
    instant: datetime
    label: str
    is_current: bool
    relationship: Literal["previous", "same", "next"]


class CityHeaderPayload(BaseModel):
    city_id: str
    name: str
    is_home: bool
    abbreviation: str
    date_text: str
    time_text: str
    relationship: Literal["previous", "same", "next"]


class CityColumnPayload(BaseModel):
    header: CityHeaderPayload
    cells: list[HourCellPayload]


class GridResponse(BaseModel):
    viewed_date: date
    is_today: bool
    anchor: datetime
    use_24_hour_format: bool
    show_ripple: bool
    columns: list[CityColumnPayload]


class ViewedDateResponse(BaseModel):
    viewed_date: date


class SelectDateRequest(BaseModel):
    viewed_date: date


class FormatRequest(BaseModel):
    use_24_hour_format: bool


class StartSessionRequest(BaseModel):
    city_id: str
    hour: int = Field(ge=0, le=23)


class ExtendSessionRequest(BaseModel):
    hour: int = Field(ge=0, le=23)


class SessionResponse(BaseModel):
    active: bool
    city_id: str | None = None
    start_hour: int | None = None
    end_hour: int | None = None
    selected_hours: list[int] = Field(default_factory=list)


class EventPayload(BaseModel):
    event_id: str
    title: str
    start: datetime
    end: datetime
    location: str
    notes: str
    timezone_id: str
    start_text: str
    end_text: str
    duration_text: str


class FinalizeResponse(BaseModel):
    created: bool
    event: EventPayload | None = None


class EventListResponse(BaseModel):
    events: list[EventPayload]


class UpdateEventRequest(BaseModel):
    title: str | None = None
    location: str | None = None
    notes: str | None = None


class FeaturedCityPayload(BaseModel):
    name: str
    timezone_id: str


class TimezoneListResponse(BaseModel):
    timezones: list[str]


class FeaturedCityListResponse(BaseModel):
    cities: list[FeaturedCityPayload]


class ExportResponse(BaseModel):
    exported: bool
    path: str | None = None
