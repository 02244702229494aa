"""Application orchestration entry points."""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from wingdex.adapters.ebird import export_dex_csv, export_outing_csv, parse_ebird_csv
from wingdex.adapters.snapshot import JsonSnapshotStore, load_exported_dex
from wingdex.adapters.taxonomy_json import JsonTaxonomySource
from wingdex.config import get_storage_config, get_taxonomy_config
from wingdex.domain.aggregation import (
    AggregationResult,
    ExternalMerge,
    IncrementalUpdate,
    Rebuild,
    aggregate,
    patch_metadata,
)
from wingdex.domain.checklist_import import (
    ImportBatch,
    detect_import_conflicts,
    group_previews_into_outings,
    random_id,
)
from wingdex.domain.clock import utcnow
from wingdex.domain.identification import IdentificationCandidate, canonicalize_candidates
from wingdex.domain.model import Certainty, DexMetaPatch, ImportConflict, LifeListSnapshot
from wingdex.domain.taxonomy import NameResolver, TaxonomyCatalog

if TYPE_CHECKING:
    from pathlib import Path

    from wingdex.config import StorageConfig, TaxonomyConfig
    from wingdex.domain.checklist_import import IdFactory
    from wingdex.domain.clock import Clock
    from wingdex.domain.model import ImportPreview, Outing, SearchResult, SpeciesRecord
    from wingdex.domain.ports import SnapshotStore, TaxonomySource

log = logging.getLogger(__name__)


class UnknownOutingError(LookupError):
    """Raised when an operation names an outing that is not in the snapshot."""


def build_catalog(
    config: TaxonomyConfig | None = None,
    *,
    source: TaxonomySource | None = None,
) -> TaxonomyCatalog:
    effective_config = config or get_taxonomy_config()
    effective_source = source or JsonTaxonomySource(effective_config.path)
    catalog = TaxonomyCatalog.from_rows(effective_source())
    log.info("Loaded taxonomy with %s species", len(catalog))
    return catalog


def build_resolver(
    config: TaxonomyConfig | None = None,
    *,
    catalog: TaxonomyCatalog | None = None,
) -> NameResolver:
    effective_config = config or get_taxonomy_config()
    return NameResolver(
        catalog or build_catalog(effective_config),
        fuzzy_threshold=effective_config.fuzzy_threshold,
    )


def build_snapshot_store(config: StorageConfig | None = None) -> JsonSnapshotStore:
    effective_config = config or get_storage_config()
    return JsonSnapshotStore(effective_config.snapshot_path())


def search_species(
    query: str,
    *,
    catalog: TaxonomyCatalog,
    limit: int | None = None,
    config: TaxonomyConfig | None = None,
) -> list[SearchResult]:
    if limit is None:
        limit = (config or get_taxonomy_config()).search_limit
    return catalog.search(query, limit)


@dataclass(frozen=True, slots=True, kw_only=True)
class SpeciesResolution:
    query: str
    record: SpeciesRecord | None
    label: str
    reference_code: str | None
    article_title: str | None

    @property
    def matched(self) -> bool:
        return self.record is not None


def resolve_species(name: str, *, resolver: NameResolver) -> SpeciesResolution:
    record = resolver.find_best_match(name)
    if record is None:
        return SpeciesResolution(
            query=name,
            record=None,
            label=name,
            reference_code=resolver.get_reference_code(name, derive=True),
            article_title=None,
        )
    return SpeciesResolution(
        query=name,
        record=record,
        label=record.label,
        reference_code=resolver.get_reference_code(record.common_name, derive=True),
        article_title=resolver.get_wiki_title(record.common_name),
    )


def identify_candidates(
    model_output: str,
    *,
    resolver: NameResolver,
    config: TaxonomyConfig | None = None,
) -> list[IdentificationCandidate]:
    """Canonicalize the ``candidates`` array of a decoded vision-model response."""

    effective_config = config or get_taxonomy_config()
    payload: object = json.loads(model_output)
    raw_candidates: object = payload.get("candidates") if isinstance(payload, dict) else payload
    if not isinstance(raw_candidates, list):
        raise ValueError("Model output must contain a 'candidates' array")
    return canonicalize_candidates(
        raw_candidates,
        resolver,
        min_confidence=effective_config.candidate_min_confidence,
    )


def rebuild_dex(*, store: SnapshotStore, clock: Clock = utcnow) -> AggregationResult:
    snapshot = store.load()
    result = aggregate(
        Rebuild(
            outings=snapshot.outings,
            observations=snapshot.observations,
            existing_dex=snapshot.dex,
        ),
        clock=clock,
    )
    store.save(replace(snapshot, dex=result.entries))
    log.info(
        "Rebuilt Dex: species=%s, new_species=%s",
        len(result.entries),
        result.new_species_count,
    )
    return result


def confirm_outing(
    outing_id: str,
    *,
    store: SnapshotStore,
    clock: Clock = utcnow,
) -> AggregationResult:
    """Confirm every pending or possible observation of one outing and update the Dex."""

    snapshot = store.load()
    outing = _find_outing(snapshot, outing_id)

    confirmable = {Certainty.PENDING, Certainty.POSSIBLE}
    observations = tuple(
        replace(item, certainty=Certainty.CONFIRMED)
        if item.outing_id == outing_id and item.certainty in confirmable
        else item
        for item in snapshot.observations
    )
    newly_confirmed = [
        item
        for item, before in zip(observations, snapshot.observations, strict=True)
        if item is not before
    ]
    result = aggregate(
        IncrementalUpdate(
            outing=outing,
            newly_confirmed=newly_confirmed,
            all_observations=observations,
            existing_dex=snapshot.dex,
            outings=snapshot.outings,
        ),
        clock=clock,
    )
    store.save(replace(snapshot, observations=observations, dex=result.entries))
    log.info(
        "Confirmed %s observations on outing %s: new_species=%s",
        len(newly_confirmed),
        outing_id,
        result.new_species_count,
    )
    return result


@dataclass(frozen=True, slots=True)
class ChecklistImportResult:
    previews: tuple[ImportPreview, ...]
    batch: ImportBatch
    new_species_count: int

    @property
    def conflict_counts(self) -> Counter[ImportConflict]:
        return Counter(
            preview.conflict for preview in self.previews if preview.conflict is not None
        )


def import_checklist(
    csv_text: str,
    *,
    store: SnapshotStore,
    resolver: NameResolver,
    user_id: str,
    clock: Clock = utcnow,
    id_factory: IdFactory = random_id,
) -> ChecklistImportResult:
    """Import checklist rows as new outings and rebuild the Dex around them."""

    snapshot = store.load()
    previews = parse_ebird_csv(csv_text, resolver=resolver)
    labelled = detect_import_conflicts(previews, snapshot.dex)
    batch = group_previews_into_outings(
        previews,
        user_id=user_id,
        clock=clock,
        id_factory=id_factory,
    )
    outings = (*batch.outings, *snapshot.outings)
    observations = (*snapshot.observations, *batch.observations)
    result = aggregate(
        Rebuild(outings=outings, observations=observations, existing_dex=snapshot.dex),
        clock=clock,
    )
    store.save(LifeListSnapshot(outings=outings, observations=observations, dex=result.entries))
    log.info(
        "Imported checklist: rows=%s, outings=%s, new_species=%s",
        len(previews),
        len(batch.outings),
        result.new_species_count,
    )
    return ChecklistImportResult(
        previews=tuple(labelled),
        batch=batch,
        new_species_count=result.new_species_count,
    )


def merge_dex_export(path: Path, *, store: SnapshotStore) -> AggregationResult:
    incoming = load_exported_dex(path)
    snapshot = store.load()
    result = aggregate(ExternalMerge(incoming_entries=incoming, existing_dex=snapshot.dex))
    store.save(replace(snapshot, dex=result.entries))
    log.info(
        "Merged %s exported entries: species=%s, new_species=%s",
        len(incoming),
        len(result.entries),
        result.new_species_count,
    )
    return result


def annotate_species(species_name: str, notes: str, *, store: SnapshotStore) -> bool:
    """Replace the notes of one Dex entry; returns ``False`` when the species has no entry."""

    snapshot = store.load()
    if all(entry.species_name != species_name for entry in snapshot.dex):
        return False
    entries = patch_metadata(snapshot.dex, [DexMetaPatch(species_name=species_name, notes=notes)])
    store.save(replace(snapshot, dex=tuple(entries)))
    return True


def export_dex(*, store: SnapshotStore) -> str:
    return export_dex_csv(store.load().dex)


def export_outing(
    outing_id: str,
    *,
    store: SnapshotStore,
    resolver: NameResolver | None = None,
    include_header: bool = True,
) -> str:
    snapshot = store.load()
    outing = _find_outing(snapshot, outing_id)
    observations = [item for item in snapshot.observations if item.outing_id == outing_id]
    return export_outing_csv(
        outing,
        observations,
        include_header=include_header,
        resolver=resolver,
    )


def _find_outing(snapshot: LifeListSnapshot, outing_id: str) -> Outing:
    outing = next((item for item in snapshot.outings if item.id == outing_id), None)
    if outing is None:
        raise UnknownOutingError(f"Unknown outing: {outing_id}")
    return outing
