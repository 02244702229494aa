from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.sightings import FIXED_NOW
from wingdex.domain.taxonomy import NameResolver, TaxonomyCatalog

if TYPE_CHECKING:
    from datetime import datetime

    from wingdex.domain.clock import Clock

TAXONOMY_ROWS: tuple[tuple[str, ...], ...] = (
    ("Bald Eagle", "Haliaeetus leucocephalus", "baleag", "Bald eagle"),
    ("White-tailed Eagle", "Haliaeetus albicilla", "whteag", "White-tailed eagle"),
    ("Golden Eagle", "Aquila chrysaetos", "goleag", "Golden eagle"),
    ("Northern Bald Ibis", "Geronticus eremita", "waldra1"),
    ("Southern Bald Ibis", "Geronticus calvus", "", None),
    ("Common Kingfisher", "Alcedo atthis", "comkin1", "Common kingfisher"),
    ("Belted Kingfisher", "Megaceryle alcyon", "belkin1", "Belted kingfisher"),
    ("Blue Jay", "Cyanocitta cristata", "blujay", "Blue jay"),
    ("Steller's Jay", "Cyanocitta stelleri", "stejay", "Steller's jay"),
    ("Northern Cardinal", "Cardinalis cardinalis", "norcar", "Northern cardinal"),
    ("American Robin", "Turdus migratorius", "amerob", "American robin"),
    ("European Robin", "Erithacus rubecula", "eurrob1", "European robin"),
    ("Great Blue Heron", "Ardea herodias", "grbher3", "Great blue heron"),
    ("Black-capped Chickadee", "Poecile atricapillus", "bkcchi", "Black-capped chickadee"),
    ("Osprey", "Pandion haliaetus", "osprey", "Osprey"),
)


@pytest.fixture
def taxonomy_rows() -> list[tuple[str, ...]]:
    return list(TAXONOMY_ROWS)


@pytest.fixture
def catalog() -> TaxonomyCatalog:
    return TaxonomyCatalog.from_rows(TAXONOMY_ROWS)


@pytest.fixture
def resolver(catalog: TaxonomyCatalog) -> NameResolver:
    return NameResolver(catalog)


@pytest.fixture
def fixed_clock() -> Clock:
    def clock() -> datetime:
        return FIXED_NOW

    return clock
