from fastapi import Response
from app.deps import BADGE_COOKIE

def set_badge_cookie(response: Response, token: str, max_age: int) -> None:
    response.set_cookie(
        key=BADGE_COOKIE,
        value=token,
        max_age=max_age,
        path="/",
        httponly=True,
        samesite="lax",
    )

def clear_badge_cookie(response: Response) -> None:
    response.set_cookie(key=BADGE_COOKIE, value="", max_age=0, path="/", httponly=True, samesite="lax")
