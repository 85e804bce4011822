from fastapi import Cookie, Depends, Request
from app.core.config import Settings
from app.domain.badges.service import BadgeResolution, resolve_badge
from app.security import IntegrityGuard

BADGE_COOKIE = "guildBadge"

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_guard(request: Request) -> IntegrityGuard:
    return request.app.state.guard

def get_badge_resolution(
    guild_badge: str | None = Cookie(default=None, alias=BADGE_COOKIE),
    guard: IntegrityGuard = Depends(get_guard),
) -> BadgeResolution:
    return resolve_badge(guard, guild_badge)
