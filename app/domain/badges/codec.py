"""
Codec del payload de la insignia.

JSON canónico con esquema fijo: {"v", "guildName", "rank", "level", "message", "isAdmin"}.
Nunca se construyen tipos arbitrarios al decodificar; solo `Badge`.
"""
import json
from pydantic import ValidationError as SchemaError

from app.domain.badges.errors import DecodeError
from app.models.badge import Badge

SCHEMA_VERSION = 1
WIRE_FIELDS = frozenset({"v", "guildName", "rank", "level", "message", "isAdmin"})


def _reject_duplicates(pairs):
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise DecodeError(f"duplicate key {key!r}")
        obj[key] = value
    return obj

def encode(badge: Badge) -> bytes:
    doc = {"v": SCHEMA_VERSION, **badge.public()}
    return json.dumps(doc, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

def decode(payload: bytes) -> Badge:
    try:
        text = payload.decode("utf-8")
        doc = json.loads(text, object_pairs_hook=_reject_duplicates)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise DecodeError(f"malformed payload: {e}") from e

    if not isinstance(doc, dict):
        raise DecodeError("payload is not an object")

    keys = set(doc)
    if keys != WIRE_FIELDS:
        missing = sorted(WIRE_FIELDS - keys)
        extra = sorted(keys - WIRE_FIELDS)
        raise DecodeError(f"unexpected shape (missing={missing}, extra={extra})")

    version = doc.pop("v")
    # bool es subclase de int: True == 1
    if type(version) is not int or version != SCHEMA_VERSION:
        raise DecodeError(f"unsupported schema version {version!r}")

    try:
        return Badge.model_validate(doc, strict=True)
    except SchemaError as e:
        raise DecodeError(f"invalid badge fields: {e.error_count()} error(s)") from e
