import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, load_settings
from app.security import IntegrityGuard

from app.routers import badges as badges_router
from app.routers import console as console_router
from app.routers import guild as guild_router

log = logging.getLogger("main")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    if settings.ephemeral_key:
        log.warning("BADGE_SECRET_KEY not set; generating an ephemeral signing key")

    app = FastAPI(title=f"{settings.realm_name} Guild Forge")

    # Config y clave de firma: una sola vez, solo lectura
    app.state.settings = settings
    app.state.guard = IntegrityGuard(settings.secret_key)

    # ==== CORS ====
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==== Routers ====
    app.include_router(guild_router.router)
    app.include_router(badges_router.router)
    app.include_router(console_router.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


_settings = load_settings()
configure_logging(_settings.log_level)
app = create_app(_settings)


def run():
    settings = app.state.settings
    log.info("%s realm listening on port %d", settings.realm_name, settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
