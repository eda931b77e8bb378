from typing import Any, Callable, Dict, List, Optional

import httpx

from rdw_proxy.config import Settings
from rdw_proxy.services.rdw_client import create_client

RESOURCE_IDS = {
    "m9d7-ebf2": "basis",
    "8ys7-d773": "brandstof",
    "ihha-7xnj": "kleur",
    "vezc-m2t6": "carrosserie",
    "jhie-znh9": "carrosserie_specifiek",
    "3huj-srit": "assen",
}

TOYOTA = {
    "kenteken": "AB123C",
    "merk": "Toyota",
    "handelsbenaming": "Corolla",
    "datum_eerste_toelating": "20180601",
}


def make_handler(
    responses: Dict[str, Any],
    seen: Optional[List[httpx.Request]] = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """
    Build a MockTransport handler keyed by dataset name.

    A list becomes a 200 JSON body, an httpx.Response is returned as is and
    an exception is raised. Datasets not listed answer with [].
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)

        resource_id = request.url.path.rsplit("/", 1)[-1].replace(".json", "")
        name = RESOURCE_IDS[resource_id]
        result = responses.get(name, [])

        if isinstance(result, Exception):
            raise result
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)

    return handler


def mock_client(settings: Settings, handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return create_client(settings, transport=httpx.MockTransport(handler))
