from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...config import Settings, get_settings
from ...templating import templates

router = APIRouter()


@router.get("/env.js", include_in_schema=False)
async def env_js(request: Request, settings: Settings = Depends(get_settings)):
    """
    Public browser config. Only the Supabase URL and anon key go out;
    the service-role key is deliberately not part of the template context.
    """
    return templates.TemplateResponse(
        request=request,
        name="env.js.j2",
        context={
            "supabase_url": settings.supabase_url,
            "supabase_anon_key": settings.supabase_anon_key,
        },
        media_type="application/javascript",
        headers={"Cache-Control": "no-store"},
    )


@router.get("/api/health", tags=["health"])
async def health_check(settings: Settings = Depends(get_settings)) -> JSONResponse:
    """
    Liveness probe. Reports which optional integrations are configured,
    never their values.
    """
    return JSONResponse(
        content={
            "ok": True,
            "env": {
                "supabase": bool(settings.supabase_url),
                "rdwAppToken": bool(settings.rdw_app_token),
            },
        }
    )
