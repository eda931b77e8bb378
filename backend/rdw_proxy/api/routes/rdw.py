from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ...config import Settings, get_settings
from ...schemas.rdw import ErrorResponse, RdwLookupResponse
from ...services.aggregator import RdwAggregator
from ...services.plate import normalize_plate
from ...services.rdw_client import create_client

router = APIRouter()


@router.get(
    "/rdw",
    response_model=RdwLookupResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def rdw_lookup(
    kenteken: Optional[str] = Query(None, description="License plate, e.g. 'AB-123-C'"),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Look up a Dutch license plate in the RDW open data sets and return a
    flattened summary plus the full details.

    Errors (bad plate, unknown vehicle, RDW failures) are raised as
    RdwProxyError subclasses and turned into JSON by the app's handlers.
    """
    plate = normalize_plate(kenteken)

    async with create_client(settings) as client:
        result = await RdwAggregator(settings, client).aggregate(plate)

    exclude = {"raw"} if result.raw is None else None
    return JSONResponse(content=result.model_dump(by_alias=True, exclude=exclude))
