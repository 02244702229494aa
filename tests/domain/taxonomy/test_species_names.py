from __future__ import annotations

import pytest

from wingdex.domain.model import SpeciesRecord
from wingdex.domain.taxonomy import (
    derive_reference_code,
    display_name,
    format_species_label,
    scientific_name,
    tokenize,
)


def test_display_name_strips_scientific_part() -> None:
    assert display_name("Northern Cardinal (Cardinalis cardinalis)") == "Northern Cardinal"
    assert display_name("Osprey") == "Osprey"


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Northern Cardinal (Cardinalis cardinalis)", "Cardinalis cardinalis"),
        ("Osprey (Pandion haliaetus", "Pandion haliaetus"),
        ("Osprey ()", None),
        ("Osprey", None),
    ],
)
def test_scientific_name(label: str, expected: str | None) -> None:
    assert scientific_name(label) == expected


def test_format_species_label() -> None:
    record = SpeciesRecord(common_name="Blue Jay", scientific_name="Cyanocitta cristata")

    assert format_species_label(record) == "Blue Jay (Cyanocitta cristata)"


def test_tokenize_splits_on_hyphens_and_parentheses() -> None:
    assert tokenize("Black-capped Chickadee (Poecile)") == (
        "black",
        "capped",
        "chickadee",
        "poecile",
    )
    assert tokenize("   ") == ()


@pytest.mark.parametrize(
    ("common_name", "expected"),
    [
        ("Osprey", "osprey"),
        ("Killdeer", "killde"),
        ("Blue Jay", "blujay"),
        ("Steller's Jay", "stejay"),
        ("Great Blue Heron", "grbher"),
        ("Black-capped Chickadee", "blcchi"),
        ("Black-crowned Night Heron", "bcnher"),
        ("", ""),
    ],
)
def test_derive_reference_code(common_name: str, expected: str) -> None:
    assert derive_reference_code(common_name) == expected
