import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import rdw, site
from .config import Settings, get_settings
from .exceptions import InvalidPlateFormat, RdwProxyError, VehicleNotFound
from .static import PublicFiles

logger = logging.getLogger(__name__)


async def rdw_error_handler(request: Request, exc: RdwProxyError) -> JSONResponse:
    """
    Map the proxy's exception hierarchy onto {error[, detail]} bodies.
    """
    if isinstance(exc, InvalidPlateFormat):
        content = {"error": str(exc)}
    elif isinstance(exc, VehicleNotFound):
        logger.info("No vehicle found (%s)", exc)
        content = {"error": exc.public_message}
    else:
        logger.error("RDW lookup failed with %s: %s", exc.status_code, exc)
        content = {"error": exc.public_message, "detail": str(exc)}

    return JSONResponse(status_code=exc.status_code, content=content)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="RDW Kenteken Proxy",
        version="0.3.0",
        description="Proxy for RDW open data vehicle lookups, plus the E-Noer front-end.",
    )
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RdwProxyError, rdw_error_handler)

    # ---- API Routers ----

    app.include_router(
        rdw.router,
        prefix="/api",
        tags=["rdw"],
    )

    app.include_router(site.router)

    # ---- Static files, mounted last so API routes win ----

    if os.path.isdir(settings.public_dir):
        app.mount("/", PublicFiles(directory=settings.public_dir, html=True), name="public")
    else:
        logger.warning("Public directory %s not found, static files disabled", settings.public_dir)

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logger.info("E-Noer dev server on http://localhost:%s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
