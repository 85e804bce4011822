import logging
from dataclasses import dataclass
from typing import Union
from pydantic import ValidationError as SchemaError

from app.domain.badges.errors import BadgeTokenError, ValidationError
from app.models.badge import Badge, MAX_LEVEL, MAX_NAME_LENGTH, MIN_LEVEL
from app.security import IntegrityGuard

log = logging.getLogger("badges")

CUSTOM_GUILD_NAME = "Apprentice Guild"
CUSTOM_RANK = "Novice"


@dataclass(frozen=True)
class Authenticated:
    badge: Badge
    token: str


@dataclass(frozen=True)
class Unauthenticated:
    reason: str


BadgeResolution = Union[Authenticated, Unauthenticated]


def create_default_badge() -> Badge:
    return Badge()


def _clean_name(value, default: str, field: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be text")
    v = value.strip()
    if not v:
        raise ValidationError(f"{field} must not be blank")
    if len(v) > MAX_NAME_LENGTH:
        raise ValidationError(f"{field} must be at most {MAX_NAME_LENGTH} characters")
    return v


def create_custom_badge(guild_name=None, rank=None, level=None) -> Badge:
    """
    Insignia a medida. isAdmin siempre False: ningún dato del cliente lo toca.
    Valores ausentes (None) caen en los defaults del formulario.
    """
    guild = _clean_name(guild_name, CUSTOM_GUILD_NAME, "guildName")
    rnk = _clean_name(rank, CUSTOM_RANK, "rank")

    if level is None:
        lvl = MIN_LEVEL
    elif isinstance(level, bool) or not isinstance(level, int):
        raise ValidationError("level must be an integer")
    else:
        lvl = level
    if not (MIN_LEVEL <= lvl <= MAX_LEVEL):
        raise ValidationError(f"level must be between {MIN_LEVEL} and {MAX_LEVEL}")

    try:
        return Badge(
            guild_name=guild,
            rank=rnk,
            level=lvl,
            message=f"Member of {guild}",
            is_admin=False,
        )
    except SchemaError as e:
        # p.ej. texto con surrogates sueltos
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ValidationError(f"invalid badge fields: {', '.join(fields)}") from e


def resolve_badge(guard: IntegrityGuard, raw_token: str | None) -> BadgeResolution:
    """
    NoToken -> Authenticated(badge) si open_token funciona, si no Unauthenticated.
    No hay estado intermedio de confianza parcial.
    """
    if not raw_token:
        return Unauthenticated("no token")
    try:
        badge = guard.open_token(raw_token)
    except BadgeTokenError as e:
        log.info("rejected badge token: %s: %s", type(e).__name__, e)
        return Unauthenticated("invalid token")
    return Authenticated(badge=badge, token=raw_token)


def effective_badge(resolution: BadgeResolution) -> Badge:
    if isinstance(resolution, Authenticated):
        return resolution.badge
    return create_default_badge()


def is_admin(resolution: BadgeResolution) -> bool:
    return isinstance(resolution, Authenticated) and resolution.badge.is_admin
