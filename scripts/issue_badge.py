# scripts/issue_badge.py
# Emisión de confianza: firma una insignia con la misma BADGE_SECRET_KEY del servidor.
# Es la única vía por la que existe una insignia con isAdmin=True.
import os
import sys
import argparse
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv
from pydantic import ValidationError
from app.core.config import MIN_SECRET_LENGTH
from app.models.badge import Badge
from app.security import IntegrityGuard

def issue(secret_key: str, guild_name: str, rank: str, level: int, admin: bool) -> str:
    badge = Badge(
        guild_name=guild_name,
        rank=rank,
        level=level,
        message=f"Member of {guild_name}",
        is_admin=admin,
    )
    return IntegrityGuard(secret_key).issue_token(badge).serialize()

def main(argv=None):
    parser = argparse.ArgumentParser(description="Issue a signed guild badge token")
    parser.add_argument("--guild", default="Master Forgers")
    parser.add_argument("--rank", default="Forgemaster")
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--admin", action="store_true")
    args = parser.parse_args(argv)

    load_dotenv()
    secret_key = os.getenv("BADGE_SECRET_KEY", "")
    if len(secret_key) < MIN_SECRET_LENGTH:
        parser.error(f"BADGE_SECRET_KEY must be set to the server key (>= {MIN_SECRET_LENGTH} chars)")
    try:
        token = issue(secret_key, args.guild, args.rank, args.level, args.admin)
    except ValidationError as e:
        fields = ", ".join(sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]}))
        parser.error(f"invalid badge fields: {fields}")
    print(token)

if __name__ == "__main__":
    main()
