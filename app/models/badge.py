from pydantic import BaseModel, ConfigDict, Field

DEFAULT_GUILD_NAME = "Novice Guild"
DEFAULT_RANK = "Apprentice"
DEFAULT_MESSAGE = "Welcome to the forge!"

MAX_NAME_LENGTH = 64
MAX_MESSAGE_LENGTH = 128
MIN_LEVEL = 1
MAX_LEVEL = 10_000


class Badge(BaseModel):
    """Insignia de gremio. Inmutable: modificarla = emitir un token nuevo."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid", populate_by_name=True)

    guild_name: str = Field(DEFAULT_GUILD_NAME, alias="guildName", min_length=1, max_length=MAX_NAME_LENGTH)
    rank: str = Field(DEFAULT_RANK, min_length=1, max_length=MAX_NAME_LENGTH)
    level: int = Field(MIN_LEVEL, ge=MIN_LEVEL, le=MAX_LEVEL)
    message: str = Field(DEFAULT_MESSAGE, max_length=MAX_MESSAGE_LENGTH)
    is_admin: bool = Field(False, alias="isAdmin")

    def public(self) -> dict:
        return self.model_dump(by_alias=True)
