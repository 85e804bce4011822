from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from app.core.config import Settings, TEMPLATES_DIR
from app.core.cookies import clear_badge_cookie, set_badge_cookie
from app.deps import get_badge_resolution, get_guard, get_settings
from app.domain.badges.errors import ValidationError
from app.domain.badges.service import BadgeResolution, create_custom_badge, effective_badge
from app.security import IntegrityGuard

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["guild"])

def _parse_level(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValidationError("level must be an integer")

@router.get("/")
def index(
    request: Request,
    resolution: BadgeResolution = Depends(get_badge_resolution),
    settings: Settings = Depends(get_settings),
):
    return templates.TemplateResponse(request, "index.html", {
        "badge": effective_badge(resolution),
        "realm_name": settings.realm_name,
    })

@router.post("/forge-badge")
def forge_badge(
    request: Request,
    guildName: str | None = Form(None),
    rank: str | None = Form(None),
    level: str | None = Form(None),
    guard: IntegrityGuard = Depends(get_guard),
    settings: Settings = Depends(get_settings),
):
    try:
        badge = create_custom_badge(guildName, rank, _parse_level(level))
    except ValidationError as e:
        return templates.TemplateResponse(request, "index.html", {
            "badge": None,
            "realm_name": settings.realm_name,
            "error": f"Failed to forge badge: {e}",
        }, status_code=400)

    response = templates.TemplateResponse(request, "index.html", {
        "badge": badge,
        "realm_name": settings.realm_name,
        "message": "Badge forged successfully!",
    })
    set_badge_cookie(response, guard.issue_token(badge).serialize(), settings.page_cookie_max_age)
    return response

@router.post("/clear-badge")
def clear_badge():
    response = RedirectResponse(url="/", status_code=303)
    clear_badge_cookie(response)
    return response
