from pydantic import BaseModel, ConfigDict, StrictInt
from typing import Optional

class BadgeOut(BaseModel):
    guildName: str
    rank: str
    level: int
    message: str
    isAdmin: bool

class BadgeCreate(BaseModel):
    guildName: Optional[str] = None
    rank: Optional[str] = None
    level: Optional[StrictInt] = None
    # isAdmin u otros campos del cliente se descartan
    model_config = ConfigDict(extra="ignore")

class BadgeImport(BaseModel):
    badge: Optional[str] = None

class BadgeResponse(BaseModel):
    success: bool = True
    badge: BadgeOut
