from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class FailurePolicy(str, enum.Enum):
    """
    How the aggregator reacts when an upstream dataset fails.

    ALL_OR_NOTHING   any failing dataset fails the whole lookup
    PARTIAL_TOLERANT only the primary dataset is fatal; secondary failures
                     become warnings in details.warnings
    """

    ALL_OR_NOTHING = "all_or_nothing"
    PARTIAL_TOLERANT = "partial"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "FailurePolicy":
        key = (value or "").strip().lower().replace("-", "_")
        if key in {"all_or_nothing", "strict", "all"}:
            return cls.ALL_OR_NOTHING
        return cls.PARTIAL_TOLERANT


@dataclass(frozen=True)
class DatasetDescriptor:
    name: str
    resource_id: str
    primary: bool = False

    def resource_path(self) -> str:
        return f"/resource/{self.resource_id}.json"


# RDW open data (Socrata) resources, all queryable with ?kenteken=
BASIS = DatasetDescriptor("basis", "m9d7-ebf2", primary=True)
BRANDSTOF = DatasetDescriptor("brandstof", "8ys7-d773")
KLEUR = DatasetDescriptor("kleur", "ihha-7xnj")
CARROSSERIE = DatasetDescriptor("carrosserie", "vezc-m2t6")
CARROSSERIE_SPECIFIEK = DatasetDescriptor("carrosserie_specifiek", "jhie-znh9")
ASSEN = DatasetDescriptor("assen", "3huj-srit")

BODY_DATASETS: Tuple[DatasetDescriptor, ...] = (CARROSSERIE, CARROSSERIE_SPECIFIEK)

ALL_DATASETS: Tuple[DatasetDescriptor, ...] = (
    BASIS,
    BRANDSTOF,
    KLEUR,
    CARROSSERIE,
    CARROSSERIE_SPECIFIEK,
    ASSEN,
)


def build_dataset_set(include_body: bool = True) -> Tuple[DatasetDescriptor, ...]:
    """
    The datasets queried per lookup. Body datasets can be left out; some
    deployments saw 400s from them when filtered by kenteken.
    """
    if include_body:
        return ALL_DATASETS
    return tuple(d for d in ALL_DATASETS if d not in BODY_DATASETS)
