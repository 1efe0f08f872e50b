from fastapi import Request, Response
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.exceptions import AuthenticationError, PermissionDeniedError, ValidationError
from ..services import auth


def get_token_from_cookie_or_header(request: Request):
    auth_header = request.headers.get("Authorization")
    if auth_header:
        return auth_header.replace("Bearer ", "")

    token = request.cookies.get("token")
    if token:
        return token.replace("Bearer ", "")
    return None


def set_auth_cookie(response: Response, access_token: str):
    response.set_cookie(
        key="token",
        value=f"Bearer {access_token}",
        httponly=True,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        expires=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        samesite="lax",
        secure=False
    )


def get_db(info) -> Session:
    return info.context["db"]


def get_current_user(info):
    context = info.context
    if "user" not in context:
        token = get_token_from_cookie_or_header(context["request"])
        context["user"] = auth.authenticate(context["db"], token)
    return context["user"]


def has_admin_session(info) -> bool:
    try:
        return bool(get_current_user(info).is_admin)
    except AuthenticationError:
        return False


def require_admin(info):
    user = get_current_user(info)
    if not user.is_admin:
        raise PermissionDeniedError("Admin privileges required")
    return user


def parse_id(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid id: {value!r}")
