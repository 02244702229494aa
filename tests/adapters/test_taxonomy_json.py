from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from wingdex.adapters.taxonomy_json import (
    JsonTaxonomySource,
    TaxonomySourceError,
    bundled_taxonomy_rows,
    parse_taxonomy_rows,
)
from wingdex.domain.ports import TaxonomySource
from wingdex.domain.taxonomy import TaxonomyCatalog

if TYPE_CHECKING:
    from pathlib import Path


def test_bundled_taxonomy_builds_a_catalog() -> None:
    catalog = TaxonomyCatalog.from_rows(bundled_taxonomy_rows())

    bald_eagle = catalog.by_common_name("Bald Eagle")
    assert len(catalog) > 40
    assert bald_eagle is not None
    assert bald_eagle.scientific_name == "Haliaeetus leucocephalus"
    assert bald_eagle.reference_code == "baleag"
    assert bald_eagle.article_title == "Bald eagle"


def test_source_reads_rows_from_file(tmp_path: Path) -> None:
    path = tmp_path / "taxonomy.json"
    path.write_text(
        json.dumps([["Blue Jay", "Cyanocitta cristata", "blujay", "Blue jay"]]),
        encoding="utf-8",
    )
    source = JsonTaxonomySource(path)

    assert isinstance(source, TaxonomySource)
    assert source() == [["Blue Jay", "Cyanocitta cristata", "blujay", "Blue jay"]]


def test_source_without_path_uses_bundled_rows() -> None:
    assert JsonTaxonomySource()() == bundled_taxonomy_rows()


@pytest.mark.parametrize("text", ["{not json", '{"rows": []}'])
def test_invalid_documents_are_rejected(text: str) -> None:
    with pytest.raises(TaxonomySourceError, match="inline"):
        parse_taxonomy_rows(text, origin="inline")


def test_missing_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(TaxonomySourceError, match="Cannot read taxonomy file"):
        JsonTaxonomySource(tmp_path / "missing.json")()
