import logging
from fastapi import APIRouter, Depends, HTTPException, status
from app.core.config import Settings
from app.deps import get_badge_resolution, get_settings
from app.domain.badges.service import Authenticated, BadgeResolution, is_admin

log = logging.getLogger("console")

router = APIRouter(prefix="/api/master-console", tags=["master-console"])

@router.get("")
def master_console(
    resolution: BadgeResolution = Depends(get_badge_resolution),
    settings: Settings = Depends(get_settings),
):
    if not isinstance(resolution, Authenticated):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail={
            "error": "No guild badge found",
            "hint": "Create a badge first at /api/badge/create",
        })
    if not is_admin(resolution):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail={
            "error": "Access denied - admin privileges required",
            "hint": "Only Master Forgers with admin badges can access this console",
            "currentBadge": resolution.badge.public(),
        })

    badge = resolution.badge
    log.info("master console opened by %s (%s)", badge.guild_name, badge.rank)
    return {
        "success": True,
        "message": "Welcome to the Master Forge Console",
        "realm": settings.realm_name,
        "forgemaster": badge.guild_name,
        "rank": badge.rank,
        "flag": settings.flag,
        "consoleData": {
            "forgeTemperature": 2800,
            "activeContracts": 42,
            "integrity": "HMAC-SHA256 over a fixed-schema payload, verified before decoding",
        },
    }

@router.get("/status")
def console_status(resolution: BadgeResolution = Depends(get_badge_resolution)):
    if not isinstance(resolution, Authenticated):
        return {"hasAccess": False, "reason": "No badge"}

    has_access = is_admin(resolution)
    out = {"hasAccess": has_access, "badge": resolution.badge.public()}
    if not has_access:
        out["reason"] = "Badge is not admin"
    return out
