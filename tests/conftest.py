from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from helpers import make_handler, mock_client
from rdw_proxy.config import Settings
from rdw_proxy.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        public_dir=str(tmp_path / "missing-public"),
        supabase_url="https://example.supabase.co",
        supabase_anon_key="anon-key",
        supabase_service_role_key="service-role-secret",
    )


@pytest.fixture
def api(monkeypatch):
    """
    Returns a factory: api(responses, settings=None, seen=None) -> TestClient
    wired to a mocked RDW.
    """

    def factory(
        responses: Dict[str, Any],
        settings: Optional[Settings] = None,
        seen: Optional[List[httpx.Request]] = None,
    ) -> TestClient:
        settings = settings or Settings(public_dir="/nonexistent-public-dir")
        handler = make_handler(responses, seen)
        monkeypatch.setattr(
            "rdw_proxy.api.routes.rdw.create_client",
            lambda s: mock_client(s, handler),
        )
        return TestClient(create_app(settings))

    return factory
