import binascii
import re
from dataclasses import dataclass
from jose import jwk
from jose.utils import base64url_decode, base64url_encode

from app.domain.badges import codec
from app.domain.badges.errors import IntegrityError
from app.models.badge import Badge

ALGORITHM = "HS256"
TAG_SIZE = 32  # SHA-256
MAX_TOKEN_LENGTH = 4096

_TOKEN_RE = re.compile(r"[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class Token:
    payload: bytes
    tag: bytes

    def serialize(self) -> str:
        return f"{base64url_encode(self.payload).decode('ascii')}.{base64url_encode(self.tag).decode('ascii')}"

    def __str__(self) -> str:
        return self.serialize()

    @classmethod
    def parse(cls, raw: str) -> "Token":
        if len(raw) > MAX_TOKEN_LENGTH or not _TOKEN_RE.fullmatch(raw):
            raise IntegrityError("malformed token")
        payload_b64, tag_b64 = raw.split(".")
        try:
            payload = base64url_decode(payload_b64.encode("ascii"))
            tag = base64url_decode(tag_b64.encode("ascii"))
        except (binascii.Error, ValueError) as e:
            raise IntegrityError("malformed token encoding") from e
        if len(tag) != TAG_SIZE:
            raise IntegrityError("malformed tag")
        return cls(payload=payload, tag=tag)


class IntegrityGuard:
    """
    Firma y verifica payloads de insignias con HMAC-SHA256.
    La clave se fija al arrancar; nunca se deriva de datos del request.
    """

    def __init__(self, secret_key: str):
        self._key = jwk.construct(secret_key, algorithm=ALGORITHM)

    def sign(self, payload: bytes) -> bytes:
        return self._key.sign(payload)

    def verify(self, payload: bytes, tag: bytes) -> bool:
        # HMACKey.verify compara con hmac.compare_digest
        return self._key.verify(payload, tag)

    def issue_token(self, badge: Badge) -> Token:
        payload = codec.encode(badge)
        return Token(payload=payload, tag=self.sign(payload))

    def open_token(self, token: Token | str) -> Badge:
        """Verifica primero, decodifica después. Sin firma válida el payload no se toca."""
        if isinstance(token, str):
            token = Token.parse(token)
        if not self.verify(token.payload, token.tag):
            raise IntegrityError("tag mismatch")
        return codec.decode(token.payload)
