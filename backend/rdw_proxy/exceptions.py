"""Exception hierarchy for the RDW proxy."""

from __future__ import annotations

from typing import Optional

# Bound on upstream text carried in messages, logs and warnings.
MAX_DETAIL_CHARS = 200


def truncate(text: str, limit: int = MAX_DETAIL_CHARS) -> str:
    if len(text) > limit:
        return f"{text[:limit]}…"
    return text


class RdwProxyError(Exception):
    """Base exception for all proxy errors."""

    status_code = 500
    public_message = "RDW service fout"


class InvalidPlateFormat(RdwProxyError):
    """Plate is empty or does not match ^[A-Z0-9]{1,8}$ after normalization."""

    status_code = 400


class VehicleNotFound(RdwProxyError):
    """Primary dataset holds no usable record for the plate."""

    status_code = 404
    public_message = "Geen voertuig gevonden voor kenteken."


class UpstreamError(RdwProxyError):
    """Failure talking to the RDW open data service."""

    status_code = 502

    def __init__(self, message: str, *, dataset: str = "", url: str = "") -> None:
        self.dataset = dataset
        self.url = url
        super().__init__(message)


class UpstreamFetchError(UpstreamError):
    """Non-2xx status, timeout or network failure."""

    def __init__(
        self,
        message: str,
        *,
        dataset: str = "",
        url: str = "",
        status: Optional[int] = None,
        body_excerpt: str = "",
    ) -> None:
        self.status = status
        self.body_excerpt = body_excerpt
        super().__init__(message, dataset=dataset, url=url)


class UpstreamParseError(UpstreamError):
    """Response body is not a JSON array of rows."""


class AggregationError(RdwProxyError):
    """Anything else that went wrong while building the response."""
