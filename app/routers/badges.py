import logging
from fastapi import APIRouter, Depends, HTTPException, Response
from app.core.config import Settings
from app.core.cookies import set_badge_cookie
from app.deps import get_badge_resolution, get_guard, get_settings
from app.domain.badges.errors import BadgeTokenError, ValidationError
from app.domain.badges.service import (
    Authenticated,
    BadgeResolution,
    create_custom_badge,
    effective_badge,
)
from app.schemas.badge import BadgeCreate, BadgeImport, BadgeResponse
from app.security import IntegrityGuard

log = logging.getLogger("badges")

router = APIRouter(prefix="/api/badge", tags=["badges"])

@router.get("", response_model=BadgeResponse)
def get_badge(resolution: BadgeResolution = Depends(get_badge_resolution)):
    # sin token (o token inválido) -> insignia por defecto, nunca error
    return {"success": True, "badge": effective_badge(resolution).public()}

@router.post("/create")
def create_badge(
    body: BadgeCreate,
    response: Response,
    guard: IntegrityGuard = Depends(get_guard),
    settings: Settings = Depends(get_settings),
):
    try:
        badge = create_custom_badge(body.guildName, body.rank, body.level)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    token = guard.issue_token(badge).serialize()
    set_badge_cookie(response, token, settings.api_cookie_max_age)

    return {
        "success": True,
        "message": "Badge created successfully",
        "badge": badge.public(),
        "token": token,
        "hint": "Use /api/badge/export to get your badge token",
    }

@router.get("/export")
def export_badge(
    resolution: BadgeResolution = Depends(get_badge_resolution),
    guard: IntegrityGuard = Depends(get_guard),
):
    if isinstance(resolution, Authenticated):
        badge, token = resolution.badge, resolution.token
    else:
        badge = effective_badge(resolution)
        token = guard.issue_token(badge).serialize()

    return {
        "success": True,
        "badge": token,
        "badgeInfo": badge.public(),
        "hint": "This is your signed badge token. Keep it to restore your badge later.",
        "warning": "The token is signed by the forge; any hand edit makes it invalid.",
    }

@router.post("/import")
def import_badge(
    body: BadgeImport,
    response: Response,
    guard: IntegrityGuard = Depends(get_guard),
    settings: Settings = Depends(get_settings),
):
    raw = (body.badge or "").strip()
    if not raw:
        raise HTTPException(status_code=400, detail="Badge data is required")

    try:
        badge = guard.open_token(raw)
    except BadgeTokenError as e:
        log.info("badge import rejected: %s: %s", type(e).__name__, e)
        raise HTTPException(status_code=400, detail="Invalid badge token")

    set_badge_cookie(response, raw, settings.api_cookie_max_age)

    out = {
        "success": True,
        "message": "Badge imported successfully",
        "badge": badge.public(),
    }
    if badge.is_admin:
        out["adminDetected"] = True
        out["hint"] = "Admin badge imported. The Master Console is open to you."
    return out
