"""Translate between snapshot payloads and domain values."""

from __future__ import annotations

from wingdex.domain.model import DexEntry, LifeListSnapshot, Observation, Outing

from .schema import DexEntryPayload, ObservationPayload, OutingPayload, SnapshotPayload


def outing_from_payload(payload: OutingPayload) -> Outing:
    return Outing(
        id=payload.id,
        user_id=payload.user_id,
        start_time=payload.start_time,
        end_time=payload.end_time,
        location_name=payload.location_name,
        lat=payload.lat,
        lon=payload.lon,
        notes=payload.notes,
        created_at=payload.created_at,
    )


def observation_from_payload(payload: ObservationPayload) -> Observation:
    return Observation(
        id=payload.id,
        outing_id=payload.outing_id,
        species_name=payload.species_name,
        count=payload.count,
        certainty=payload.certainty,
        representative_photo_id=payload.representative_photo_id,
        ai_confidence=payload.ai_confidence,
        notes=payload.notes,
    )


def dex_entry_from_payload(payload: DexEntryPayload) -> DexEntry:
    return DexEntry(
        species_name=payload.species_name,
        first_seen_date=payload.first_seen_date,
        last_seen_date=payload.last_seen_date,
        added_date=payload.added_date,
        total_outings=payload.total_outings,
        total_count=payload.total_count,
        best_photo_id=payload.best_photo_id,
        notes=payload.notes,
    )


def snapshot_from_payload(payload: SnapshotPayload) -> LifeListSnapshot:
    return LifeListSnapshot(
        outings=tuple(outing_from_payload(item) for item in payload.outings),
        observations=tuple(observation_from_payload(item) for item in payload.observations),
        dex=tuple(dex_entry_from_payload(item) for item in payload.dex),
    )


def outing_to_payload(outing: Outing) -> OutingPayload:
    return OutingPayload(
        id=outing.id,
        user_id=outing.user_id,
        start_time=outing.start_time,
        end_time=outing.end_time,
        location_name=outing.location_name,
        lat=outing.lat,
        lon=outing.lon,
        notes=outing.notes,
        created_at=outing.created_at,
    )


def observation_to_payload(observation: Observation) -> ObservationPayload:
    return ObservationPayload(
        id=observation.id,
        outing_id=observation.outing_id,
        species_name=observation.species_name,
        count=observation.count,
        certainty=observation.certainty,
        representative_photo_id=observation.representative_photo_id,
        ai_confidence=observation.ai_confidence,
        notes=observation.notes,
    )


def dex_entry_to_payload(entry: DexEntry) -> DexEntryPayload:
    return DexEntryPayload(
        species_name=entry.species_name,
        first_seen_date=entry.first_seen_date,
        last_seen_date=entry.last_seen_date,
        added_date=entry.added_date,
        total_outings=entry.total_outings,
        total_count=entry.total_count,
        best_photo_id=entry.best_photo_id,
        notes=entry.notes,
    )


def snapshot_to_payload(snapshot: LifeListSnapshot) -> SnapshotPayload:
    return SnapshotPayload(
        outings=[outing_to_payload(item) for item in snapshot.outings],
        observations=[observation_to_payload(item) for item in snapshot.observations],
        dex=[dex_entry_to_payload(item) for item in snapshot.dex],
    )

