from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import Settings
from ..constants.datasets import DatasetDescriptor
from ..exceptions import UpstreamFetchError, UpstreamParseError, truncate

logger = logging.getLogger(__name__)


def build_headers(settings: Settings) -> Dict[str, str]:
    """
    Headers for RDW requests. Only the RDW app token is ever attached;
    the Supabase keys stay inside this process.
    """
    headers = {"Accept": "application/json"}
    if settings.rdw_app_token:
        headers["X-App-Token"] = settings.rdw_app_token
    return headers


def dataset_url(settings: Settings, dataset: DatasetDescriptor) -> str:
    return f"{settings.rdw_base_url}{dataset.resource_path()}"


def create_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.rdw_timeout_s,
        headers=build_headers(settings),
        transport=transport,
    )


async def fetch_dataset(
    client: httpx.AsyncClient,
    settings: Settings,
    dataset: DatasetDescriptor,
    plate: str,
) -> List[Any]:
    """
    Fetch all rows of one RDW dataset for a plate, exactly as RDW sent them.

    An empty list means RDW has no data for this plate, which is not an error.
    """
    url = dataset_url(settings, dataset)
    params = {"kenteken": plate}
    full_url = f"{url}?kenteken={plate}"

    logger.debug("GET %s kenteken=%s", url, plate)

    try:
        r = await client.get(url, params=params)
    except httpx.TimeoutException as exc:
        logger.warning("RDW %s timed out for %s", dataset.name, full_url)
        raise UpstreamFetchError(
            f"RDW timeout for {dataset.name} ({full_url})",
            dataset=dataset.name,
            url=url,
        ) from exc
    except httpx.HTTPError as exc:
        logger.warning("RDW %s request failed for %s: %s", dataset.name, full_url, exc)
        raise UpstreamFetchError(
            f"RDW request failed for {dataset.name} ({full_url}): {truncate(str(exc))}",
            dataset=dataset.name,
            url=url,
        ) from exc

    if not r.is_success:
        excerpt = truncate(r.text)
        logger.warning(
            "RDW %s returned %s %s for %s: %s",
            dataset.name, r.status_code, r.reason_phrase, full_url, excerpt,
        )
        raise UpstreamFetchError(
            f"RDW {r.status_code} {r.reason_phrase} for {full_url}: {excerpt}",
            dataset=dataset.name,
            url=url,
            status=r.status_code,
            body_excerpt=excerpt,
        )

    try:
        data = r.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        excerpt = truncate(r.text)
        logger.warning("RDW %s returned invalid JSON for %s: %s", dataset.name, full_url, excerpt)
        raise UpstreamParseError(
            f"Invalid JSON from RDW {dataset.name} ({full_url}): {excerpt}",
            dataset=dataset.name,
            url=url,
        ) from exc

    if not isinstance(data, list):
        raise UpstreamParseError(
            f"Unexpected response from RDW {dataset.name} ({full_url}): expected a list of rows",
            dataset=dataset.name,
            url=url,
        )

    return data
