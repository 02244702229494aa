"""Domain primitives: scalar aliases.

Scalar aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

from typing import TypeAlias

UserId: TypeAlias = str
OutingId: TypeAlias = str
ObservationId: TypeAlias = str
PhotoId: TypeAlias = str
SpeciesName: TypeAlias = str
ReferenceCode: TypeAlias = str
