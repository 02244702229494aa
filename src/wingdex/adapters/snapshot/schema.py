"""Pydantic models describing the persisted snapshot payloads.

Field names follow the camelCase wire format shared with the web client; instants are
ISO-8601 strings and ``notes`` is always a string.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from wingdex.domain.model import Certainty


def _none_to_empty(value: object) -> object:
    return "" if value is None else value


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _assume_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class WingDexBaseModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class OutingPayload(WingDexBaseModel):
    id: str
    user_id: str
    start_time: datetime
    end_time: datetime
    location_name: str = ""
    lat: float | None = None
    lon: float | None = None
    notes: str = ""
    created_at: datetime | None = None

    _normalize_notes = field_validator("notes", "location_name", mode="before")(_none_to_empty)
    _normalize_times = field_validator("start_time", "end_time", "created_at")(_assume_utc)


class ObservationPayload(WingDexBaseModel):
    id: str
    outing_id: str
    species_name: str
    count: int = Field(default=1, ge=1)
    certainty: Certainty
    representative_photo_id: str | None = None
    ai_confidence: float | None = None
    notes: str = ""

    _normalize_notes = field_validator("notes", mode="before")(_none_to_empty)
    _normalize_photo = field_validator("representative_photo_id", mode="before")(_blank_to_none)


class DexEntryPayload(WingDexBaseModel):
    species_name: str
    first_seen_date: datetime
    last_seen_date: datetime
    added_date: datetime | None = None
    total_outings: int = Field(default=0, ge=0)
    total_count: int = Field(default=0, ge=0)
    best_photo_id: str | None = None
    notes: str = ""

    _normalize_notes = field_validator("notes", mode="before")(_none_to_empty)
    _normalize_photo = field_validator("best_photo_id", mode="before")(_blank_to_none)
    _normalize_dates = field_validator("first_seen_date", "last_seen_date", "added_date")(
        _assume_utc
    )


class SnapshotPayload(WingDexBaseModel):
    outings: list[OutingPayload] = Field(default_factory=list["OutingPayload"])
    observations: list[ObservationPayload] = Field(default_factory=list["ObservationPayload"])
    dex: list[DexEntryPayload] = Field(default_factory=list["DexEntryPayload"])


DexEntryList = TypeAdapter(list[DexEntryPayload])
