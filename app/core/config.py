import os
import secrets
from pathlib import Path
from typing import Tuple
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Raíz del paquete app/  ->  .../app
APP_DIR = Path(__file__).resolve().parents[1]
TEMPLATES_DIR = APP_DIR / "templates"

MIN_SECRET_LENGTH = 32


class Settings(BaseModel):
    """Configuración de arranque. Se construye una vez y no cambia."""

    model_config = ConfigDict(frozen=True)

    realm_name: str = "Svartalfheim"
    port: int = Field(8080, ge=1, le=65535)
    flag: str = "FLAG{svartalfheim-local-dev}"
    secret_key: str = Field(min_length=MIN_SECRET_LENGTH, repr=False)
    cors_origins: Tuple[str, ...] = ("http://localhost:4200",)
    api_cookie_max_age: int = Field(86400, ge=0)
    page_cookie_max_age: int = Field(3600, ge=0)
    log_level: str = "INFO"
    ephemeral_key: bool = False


def _split_origins(raw: str | None) -> Tuple[str, ...]:
    if not raw:
        return ("http://localhost:4200",)
    return tuple(o.strip() for o in raw.split(",") if o.strip())


def load_settings() -> Settings:
    """Lee .env + variables de entorno. Sin BADGE_SECRET_KEY genera una clave efímera."""
    load_dotenv()

    secret_key = os.getenv("BADGE_SECRET_KEY")
    ephemeral_key = not secret_key
    if ephemeral_key:
        # los tokens emitidos dejan de valer al reiniciar el proceso
        secret_key = secrets.token_urlsafe(48)

    return Settings(
        realm_name=os.getenv("REALM_NAME", "Svartalfheim"),
        port=int(os.getenv("PORT", "8080")),
        flag=os.getenv("REALM_FLAG", "FLAG{svartalfheim-local-dev}"),
        secret_key=secret_key,
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS")),
        api_cookie_max_age=int(os.getenv("BADGE_COOKIE_MAX_AGE", "86400")),
        page_cookie_max_age=int(os.getenv("FORGE_COOKIE_MAX_AGE", "3600")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        ephemeral_key=ephemeral_key,
    )
