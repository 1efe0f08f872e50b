"""Account resolvers.

`createUser` keeps `isAdmin` only when the caller already holds an admin
session. `updateUser` and `deleteUser` act on any id without a session, as
the client expects; put them behind `get_current_user` before exposing the
API publicly.
"""
from datetime import date

from ariadne import MutationType, ObjectType, QueryType

from .. import schemas
from ..services import auth
from .context import get_current_user, get_db, has_admin_session, parse_id, set_auth_cookie

query = QueryType()
mutation = MutationType()
user = ObjectType("User")

user.set_alias("fullName", "full_name")
user.set_alias("userName", "user_name")
user.set_alias("isAdmin", "is_admin")


@user.field("birthday")
def resolve_birthday(obj, *_):
    value = getattr(obj, "birthday", None)
    if isinstance(value, date):
        return value.isoformat()
    return value


@query.field("getAllUsers")
def resolve_get_all_users(_, info):
    return auth.list_users(get_db(info))


@query.field("me")
def resolve_me(_, info):
    return get_current_user(info)


@mutation.field("createUser")
def resolve_create_user(_, info, **kwargs):
    user_in = schemas.UserCreate.model_validate(kwargs)
    if user_in.is_admin and not has_admin_session(info):
        user_in = user_in.model_copy(update={"is_admin": False})
    return auth.signup(get_db(info), user_in)


@mutation.field("login")
def resolve_login(_, info, email=None, password=None):
    token = auth.login(get_db(info), email, password)
    set_auth_cookie(info.context["response"], token)
    return token


@mutation.field("deleteUser")
def resolve_delete_user(_, info, id=None):
    return auth.delete_user(get_db(info), parse_id(id))


@mutation.field("updateUserPassword")
def resolve_update_user_password(_, info, **kwargs):
    return auth.update_password(get_db(info), schemas.PasswordUpdate.model_validate(kwargs))


@mutation.field("updateUser")
def resolve_update_user(_, info, id=None, oldPassword=None, newPassword=None, **kwargs):
    return auth.update_user(
        get_db(info),
        parse_id(id),
        schemas.UserUpdate.model_validate(kwargs),
        old_password=oldPassword,
        new_password=newPassword,
    )


@mutation.field("resetUser")
def resolve_reset_user(_, info, email=None):
    return auth.reset_request(get_db(info), email, info.context["background_tasks"])


@mutation.field("checkVerificationCode")
def resolve_check_verification_code(_, info, email=None, code=None):
    return auth.check_code(get_db(info), email, code)
