"""HTTP endpoints consumed by the presentation layer."""

from __future__ import annotations

from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from glorified_clock.api.schemas import (
    AddCityRequest,
    AddCityResponse,
    CityColumnPayload,
    CityHeaderPayload,
    CityListResponse,
    CityPayload,
    EventListResponse,
    EventPayload,
    ExportResponse,
    ExtendSessionRequest,
    FeaturedCityListResponse,
    FeaturedCityPayload,
    FinalizeResponse,
    FormatRequest,
    GridResponse,
    HourCellPayload,
    MutationResponse,
    SelectDateRequest,
    SessionResponse,
    StartSessionRequest,
    TimezoneListResponse,
    UpdateEventRequest,
    ViewedDateResponse,
)
from glorified_clock.events.models import Event
from glorified_clock.events.service import EventService
from glorified_clock.settings import ClockSettings
from glorified_clock.timeline.models import City
from glorified_clock.timeline.service import TimelineService
from glorified_clock.zones.formatting import duration_text, format_event_datetime
from glorified_clock.zones.registry import search_featured, search_timezones


def _city_payload(city: City) -> CityPayload:
    return CityPayload(city_id=city.city_id, name=city.name, timezone_id=city.timezone_id, is_home=city.is_home)


def _event_payload(event: Event, use_24_hour: bool) -> EventPayload:
    return EventPayload(
        event_id=event.event_id,
        title=event.title,
        start=event.start,
        end=event.end,
        location=event.location,
        notes=event.notes,
        timezone_id=event.timezone_id,
        start_text=format_event_datetime(event.start, event.timezone_id, use_24_hour),
        end_text=format_event_datetime(event.end, event.timezone_id, use_24_hour),
        duration_text=duration_text(event.start, event.end),
    )


def create_app(
    timeline_service: TimelineService | None = None,
    event_service: EventService | None = None,
    settings: ClockSettings | None = None,
) -> FastAPI:
    app = FastAPI(title="glorified-clock API", version="0.1.0")
    config = settings or ClockSettings.from_env()
    timeline = timeline_service or TimelineService.from_settings(config)
    events = event_service or EventService(anchor_provider=timeline.grid_anchor)

    def _require_city(city_id: str) -> City:
        city = timeline.get_city(city_id)
        if city is None:
            raise HTTPException(status_code=404, detail=f"city '{city_id}' not found")
        return city

    def _session_response() -> SessionResponse:
        session = events.session
        selected = session.selected_range()
        return SessionResponse(
            active=session.active,
            city_id=session.city.city_id if session.city is not None else None,
            start_hour=session.start_hour,
            end_hour=session.end_hour,
            selected_hours=list(range(selected[0], selected[1] + 1)) if selected and session.active else [],
        )

    @app.get("/")
    def root() -> dict[str, str]:
        return {
            "service": "glorified-clock API",
            "status": "ok",
            "docs": "/docs",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon() -> Response:
        return Response(status_code=204)

    @app.get("/v1/cities", response_model=CityListResponse)
    def list_cities() -> CityListResponse:
        return CityListResponse(cities=[_city_payload(city) for city in timeline.cities])

    @app.post("/v1/cities", response_model=AddCityResponse)
    def add_city(payload: AddCityRequest) -> AddCityResponse:
        city = timeline.add_city(name=payload.name, timezone_id=payload.timezone_id)
        if city is None:
            return AddCityResponse(added=False)
        return AddCityResponse(added=True, city=_city_payload(city))

    @app.delete("/v1/cities/{city_id}", response_model=MutationResponse)
    def remove_city(city_id: str) -> MutationResponse:
        return MutationResponse(changed=timeline.remove_city(city_id))

    @app.post("/v1/cities/{city_id}/home", response_model=MutationResponse)
    def set_home(city_id: str) -> MutationResponse:
        _require_city(city_id)
        return MutationResponse(changed=timeline.set_home(city_id))

    @app.get("/v1/grid", response_model=GridResponse)
    def grid() -> GridResponse:
        timeline.tick()
        columns: list[CityColumnPayload] = []
        for city in timeline.cities:
            header = timeline.header(city.city_id)
            columns.append(
                CityColumnPayload(
                    header=CityHeaderPayload(
                        city_id=header.city_id,
                        name=header.name,
                        is_home=header.is_home,
                        abbreviation=header.abbreviation,
                        date_text=header.date_text,
                        time_text=header.time_text,
                        relationship=header.relationship.value,
                    ),
                    cells=[
                        HourCellPayload(
                            hour=cell.hour,
                            instant=cell.instant,
                            label=cell.label,
                            is_current=cell.is_current,
                            relationship=cell.relationship.value,
                        )
                        for cell in timeline.hour_cells(city.city_id)
                    ],
                )
            )
        return GridResponse(
            viewed_date=timeline.viewed_date,
            is_today=timeline.is_viewing_today(),
            anchor=timeline.grid_anchor(),
            use_24_hour_format=timeline.use_24_hour_format,
            show_ripple=timeline.show_ripple,
            columns=columns,
        )

    @app.post("/v1/date/{direction}", response_model=ViewedDateResponse)
    def navigate(direction: Literal["today", "previous", "next"]) -> ViewedDateResponse:
        if direction == "today":
            viewed = timeline.go_to_today()
        elif direction == "previous":
            viewed = timeline.go_to_previous_day()
        else:
            viewed = timeline.go_to_next_day()
        return ViewedDateResponse(viewed_date=viewed)

    @app.put("/v1/date", response_model=ViewedDateResponse)
    def select_date(payload: SelectDateRequest) -> ViewedDateResponse:
        return ViewedDateResponse(viewed_date=timeline.select_date(payload.viewed_date))

    @app.put("/v1/format", response_model=MutationResponse)
    def set_format(payload: FormatRequest) -> MutationResponse:
        changed = timeline.use_24_hour_format != payload.use_24_hour_format
        timeline.set_use_24_hour_format(payload.use_24_hour_format)
        return MutationResponse(changed=changed)

    @app.post("/v1/events/session", response_model=SessionResponse)
    def start_session(payload: StartSessionRequest) -> SessionResponse:
        events.start_creation(city=_require_city(payload.city_id), hour=payload.hour)
        return _session_response()

    @app.patch("/v1/events/session", response_model=SessionResponse)
    def extend_session(payload: ExtendSessionRequest) -> SessionResponse:
        events.extend_creation(hour=payload.hour)
        return _session_response()

    @app.delete("/v1/events/session", response_model=SessionResponse)
    def cancel_session() -> SessionResponse:
        events.cancel_creation()
        return _session_response()

    @app.post("/v1/events/session/finalize", response_model=FinalizeResponse)
    def finalize_session() -> FinalizeResponse:
        event = events.finalize_creation()
        if event is None:
            return FinalizeResponse(created=False)
        return FinalizeResponse(created=True, event=_event_payload(event, timeline.use_24_hour_format))

    @app.get("/v1/events", response_model=EventListResponse)
    def list_events() -> EventListResponse:
        return EventListResponse(
            events=[_event_payload(item, timeline.use_24_hour_format) for item in events.events]
        )

    @app.get("/v1/events/slot", response_model=EventListResponse)
    def events_for_slot(city_id: str, hour: int) -> EventListResponse:
        if not 0 <= hour <= 23:
            raise HTTPException(status_code=422, detail="hour must be in range [0,23]")
        city = _require_city(city_id)
        return EventListResponse(
            events=[
                _event_payload(item, timeline.use_24_hour_format)
                for item in events.events_for_slot(hour=hour, city=city)
            ]
        )

    @app.get("/v1/events/export.ics")
    def export_ics() -> Response:
        return Response(content=events.export_to_ics(), media_type="text/calendar")

    @app.post("/v1/events/export", response_model=ExportResponse)
    def export_file() -> ExportResponse:
        path = events.export_to_file(config.export_dir)
        if path is None:
            return ExportResponse(exported=False)
        return ExportResponse(exported=True, path=str(path))

    @app.put("/v1/events/{event_id}", response_model=EventPayload)
    def update_event(event_id: str, payload: UpdateEventRequest) -> EventPayload:
        updated = events.update(event_id, title=payload.title, location=payload.location, notes=payload.notes)
        if updated is None:
            raise HTTPException(status_code=404, detail=f"event '{event_id}' not found")
        return _event_payload(updated, timeline.use_24_hour_format)

    @app.delete("/v1/events/{event_id}", response_model=MutationResponse)
    def delete_event(event_id: str) -> MutationResponse:
        return MutationResponse(changed=events.delete(event_id))

    @app.get("/v1/timezones", response_model=TimezoneListResponse)
    def timezones(q: str = "") -> TimezoneListResponse:
        return TimezoneListResponse(timezones=search_timezones(q))

    @app.get("/v1/timezones/featured", response_model=FeaturedCityListResponse)
    def featured(q: str = "") -> FeaturedCityListResponse:
        return FeaturedCityListResponse(
            cities=[FeaturedCityPayload(name=item.name, timezone_id=item.timezone_id) for item in search_featured(q)]
        )

    return app


app = create_app()
