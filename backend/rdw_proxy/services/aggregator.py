from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import httpx

from ..config import Settings
from ..constants.datasets import DatasetDescriptor, FailurePolicy, build_dataset_set
from ..exceptions import (
    AggregationError,
    RdwProxyError,
    UpstreamError,
    VehicleNotFound,
    truncate,
)
from ..schemas.rdw import RdwLookupResponse
from .rdw_client import fetch_dataset
from .shaping import first_row, shape_details, shape_summary

logger = logging.getLogger(__name__)

Rows = List[Any]


def _has_vehicle(basis: Dict[str, Any]) -> bool:
    return bool(basis.get("merk") or basis.get("handelsbenaming"))


class RdwAggregator:
    """
    Looks up one plate across the configured RDW datasets and merges the
    rows into a summary/details response.

    The failure policy decides what a failing dataset does:
    - ALL_OR_NOTHING: every dataset is fetched at once, any failure aborts
    - PARTIAL_TOLERANT: the primary dataset is fetched first (404 when empty),
      then the secondaries at once; a failing secondary becomes a warning
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient,
        datasets: Optional[Sequence[DatasetDescriptor]] = None,
    ) -> None:
        self.settings = settings
        self.client = client
        self.datasets: Tuple[DatasetDescriptor, ...] = tuple(
            datasets if datasets is not None else build_dataset_set(settings.include_body_datasets)
        )

        primaries = [d for d in self.datasets if d.primary]
        if len(primaries) != 1:
            raise ValueError("Exactly one primary dataset must be configured")
        self.primary = primaries[0]
        self.secondaries = [d for d in self.datasets if not d.primary]

    async def aggregate(self, plate: str) -> RdwLookupResponse:
        try:
            if self.settings.failure_policy is FailurePolicy.ALL_OR_NOTHING:
                rows, warnings = await self._fetch_all_or_nothing(plate)
            else:
                rows, warnings = await self._fetch_partial(plate)

            return self._compose(plate, rows, warnings)

        except RdwProxyError:
            raise
        except Exception as exc:
            logger.exception("RDW aggregation failed for %s", plate)
            raise AggregationError(f"Aggregation failed for {plate}: {truncate(str(exc))}") from exc

    async def _fetch_all_or_nothing(self, plate: str) -> Tuple[Dict[str, Optional[Rows]], List[str]]:
        results = await asyncio.gather(
            *(fetch_dataset(self.client, self.settings, d, plate) for d in self.datasets)
        )
        rows: Dict[str, Optional[Rows]] = {d.name: r for d, r in zip(self.datasets, results)}

        if not _has_vehicle(first_row(rows[self.primary.name])):
            raise VehicleNotFound(f"No basis record for {plate}")

        return rows, []

    async def _fetch_partial(self, plate: str) -> Tuple[Dict[str, Optional[Rows]], List[str]]:
        primary_rows = await fetch_dataset(self.client, self.settings, self.primary, plate)
        if not _has_vehicle(first_row(primary_rows)):
            raise VehicleNotFound(f"No basis record for {plate}")

        results = await asyncio.gather(
            *(self._fetch_tolerant(d, plate) for d in self.secondaries)
        )

        rows: Dict[str, Optional[Rows]] = {self.primary.name: primary_rows}
        warnings: List[str] = []
        for dataset, (dataset_rows, warning) in zip(self.secondaries, results):
            rows[dataset.name] = dataset_rows
            if warning:
                warnings.append(warning)
        return rows, warnings

    async def _fetch_tolerant(self, dataset: DatasetDescriptor, plate: str) -> Tuple[Optional[Rows], Optional[str]]:
        try:
            return await fetch_dataset(self.client, self.settings, dataset, plate), None
        except UpstreamError as exc:
            warning = f"{dataset.name}: {truncate(str(exc))}"
            logger.warning("Secondary dataset failed for %s, continuing (%s)", plate, warning)
            return None, warning

    def _compose(self, plate: str, rows: Dict[str, Optional[Rows]], warnings: List[str]) -> RdwLookupResponse:
        def get(name: str) -> Rows:
            return rows.get(name) or []

        basis = first_row(get(self.primary.name))

        summary = shape_summary(plate, basis, get("brandstof"), get("kleur"))
        details = shape_details(
            basis,
            get("brandstof"),
            get("kleur"),
            body_rows=get("carrosserie"),
            body_specific_rows=get("carrosserie_specifiek"),
            axle_rows=get("assen"),
            warnings=warnings,
        )

        raw = {d.name: rows.get(d.name) for d in self.datasets} if self.settings.include_raw else None

        return RdwLookupResponse(summary=summary, details=details, raw=raw)
