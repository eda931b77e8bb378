from __future__ import annotations

import dataclasses
import os
from functools import lru_cache
from typing import Any, FrozenSet, Optional

from dotenv import find_dotenv, load_dotenv

from .constants.datasets import FailurePolicy

DEFAULT_RDW_BASE_URL = "https://opendata.rdw.nl"


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(value: Optional[str], default: float) -> float:
    raw = (value or "").strip()
    if not raw:
        return default
    try:
        v = float(raw)
        return v if v > 0 else default
    except ValueError:
        return default


def _env_origins(value: Optional[str]) -> FrozenSet[str]:
    raw = (value or "").strip()
    if not raw:
        return frozenset({"*"})
    return frozenset(o.strip() for o in raw.split(",") if o.strip())


def _default_public_dir() -> str:
    # backend/rdw_proxy/config.py -> <repo>/public
    here = os.path.dirname(os.path.abspath(__file__))
    return os.path.normpath(os.path.join(here, "..", "..", "public"))


@dataclasses.dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, read once at startup.

    supabase_service_role_key is held so the process can use it server-side,
    but it is never rendered into /env.js and never sent to RDW.
    """

    port: int = 3001
    rdw_app_token: Optional[str] = None
    rdw_base_url: str = DEFAULT_RDW_BASE_URL
    rdw_timeout_s: float = 10.0
    failure_policy: FailurePolicy = FailurePolicy.PARTIAL_TOLERANT
    include_body_datasets: bool = True
    include_raw: bool = True
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: Optional[str] = dataclasses.field(default=None, repr=False)
    cors_origins: FrozenSet[str] = frozenset({"*"})
    public_dir: str = dataclasses.field(default_factory=_default_public_dir)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, **overrides: Any) -> "Settings":
        """
        Build settings from the environment (and a .env file, if present).
        Keyword arguments take precedence over environment values.
        """
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

        try:
            port = int(env.get("PORT") or 3001)
        except ValueError:
            port = 3001

        kwargs: dict = {
            "port": port,
            "rdw_app_token": (env.get("RDW_APP_TOKEN") or "").strip() or None,
            "rdw_base_url": (env.get("RDW_BASE_URL") or DEFAULT_RDW_BASE_URL).rstrip("/"),
            "rdw_timeout_s": _env_float(env.get("RDW_TIMEOUT_S"), 10.0),
            "failure_policy": FailurePolicy.from_string(env.get("RDW_FAILURE_POLICY")),
            "include_body_datasets": _env_bool(env.get("RDW_INCLUDE_BODY"), True),
            "include_raw": _env_bool(env.get("RDW_INCLUDE_RAW"), True),
            "supabase_url": env.get("SUPABASE_URL") or "",
            "supabase_anon_key": env.get("SUPABASE_ANON_KEY") or "",
            "supabase_service_role_key": env.get("SUPABASE_SERVICE_ROLE_KEY") or None,
            "cors_origins": _env_origins(env.get("CORS_ORIGINS")),
            "log_level": (env.get("LOG_LEVEL") or "INFO").upper(),
        }
        if env.get("PUBLIC_DIR"):
            kwargs["public_dir"] = env["PUBLIC_DIR"]

        kwargs.update(overrides)
        return cls(**kwargs)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
