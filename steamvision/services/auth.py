from __future__ import annotations

import logging
import threading

from fastapi import BackgroundTasks
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from .. import crud, models, schemas
from ..core import security
from ..core.config import settings
from ..core.time import seconds_ago
from ..core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from ..utils import generate_verification_code, send_verification_code_email
from ..validators import (
    is_valid_birthday,
    is_valid_email,
    is_valid_full_name,
    is_valid_password,
    is_valid_user_name,
    parse_birthday,
)

logger = logging.getLogger(__name__)

INVALID_EMAIL = "Unvalid email !"
INVALID_FULL_NAME = (
    "Unvalid FullName! \nPlease use the following format : firstname (middlename) lastname"
)
INVALID_USER_NAME = "Unvalid userName !"
WEAK_PASSWORD = (
    "Password must be at least 8 characters and contains uppercase, lowercase, "
    "digits and special characters !"
)
INVALID_BIRTHDAY = "Unvalid birthday !"
ALREADY_REGISTERED = "User already registered !"
USER_NOT_FOUND = "USER DOESN'T EXIST !"
CODE_OK = "OK!"


def signup(db: Session, user_in: schemas.UserCreate) -> schemas.UserCreate:
    if not is_valid_email(user_in.email):
        raise ValidationError(INVALID_EMAIL)
    if not is_valid_full_name(user_in.full_name):
        raise ValidationError(INVALID_FULL_NAME)
    if not is_valid_user_name(user_in.user_name):
        raise ValidationError(INVALID_USER_NAME)
    if not is_valid_password(user_in.password):
        raise ValidationError(WEAK_PASSWORD)
    if user_in.password != user_in.password_confirmation:
        raise ValidationError("Password must match with passwordConfirmation !")
    if not is_valid_birthday(user_in.birthday):
        raise ValidationError(INVALID_BIRTHDAY)

    if crud.get_user_by_email_or_username(db, email=user_in.email, user_name=user_in.user_name):
        raise ConflictError(ALREADY_REGISTERED)

    crud.create_user(
        db,
        full_name=user_in.full_name,
        user_name=user_in.user_name,
        email=user_in.email,
        password=security.get_password_hash(user_in.password),
        birthday=parse_birthday(user_in.birthday),
        is_admin=bool(user_in.is_admin),
    )
    logger.info("User %s signed up", user_in.user_name)
    return user_in


def login(db: Session, identifier: str, password: str) -> str:
    """Return a session token for the user named by email or user name."""
    user = crud.get_user_by_email_or_username(db, email=identifier, user_name=identifier)
    if not user:
        raise NotFoundError("User doesn't exist !")

    if not password or not security.verify_password(password, user.password):
        raise AuthenticationError("Wrong password !")

    claims = schemas.TokenData(
        id=user.id,
        full_name=user.full_name,
        email=user.email,
        username=user.user_name,
        is_admin=user.is_admin,
    )
    logger.info("User %s logged in", user.user_name)
    return security.create_access_token(data=claims.model_dump(by_alias=True))


def authenticate(db: Session, token: str | None) -> models.User:
    """Resolve a session token to the user it was issued for."""
    if not token:
        raise AuthenticationError("Not authenticated")

    payload = security.decode_access_token(token)
    try:
        claims = schemas.TokenData.model_validate(payload)
    except PydanticValidationError:
        raise AuthenticationError("Could not validate credentials")

    user = crud.get_user(db, claims.id)
    if user is None:
        raise AuthenticationError("Could not validate credentials")
    return user


def _live_code(db: Session, email: str, code: str):
    created_after = seconds_ago(settings.VERIFICATION_CODE_TTL_SECONDS)
    return crud.get_verification_code(db, email=email, code=code, created_after=created_after)


def update_password(db: Session, data: schemas.PasswordUpdate) -> bool:
    user = crud.get_user_by_email(db, email=data.email)
    if not user:
        raise NotFoundError(USER_NOT_FOUND)

    if not _live_code(db, data.email, data.code):
        raise AuthenticationError("Authorization session expired !")
    if data.old_password != data.new_password:
        raise ValidationError("Password confirmation doesn't match with password !")

    # Accepts the change only when old_password differs from the stored one.
    if security.verify_password(data.old_password or "", user.password):
        raise ValidationError("Please choose another password")
    if not is_valid_password(data.new_password):
        raise ValidationError(WEAK_PASSWORD)

    crud.update_password_by_email(db, data.email, security.get_password_hash(data.new_password))
    crud.delete_verification_code(db, data.email, data.code)
    logger.info("Password reset for %s", data.email)
    return True


def _check_unique(db: Session, user_id: int, email: str | None = None, user_name: str | None = None):
    other = None
    if email:
        other = crud.get_user_by_email(db, email=email)
    if other is None and user_name:
        other = crud.get_user_by_username(db, user_name=user_name)
    if other is not None and other.id != user_id:
        raise ConflictError(ALREADY_REGISTERED)


def update_user(
    db: Session,
    user_id: int,
    changes_in: schemas.UserUpdate,
    old_password: str | None = None,
    new_password: str | None = None,
) -> models.User:
    user = crud.get_user(db, user_id)
    if not user:
        raise NotFoundError(USER_NOT_FOUND)

    changes = {}
    if changes_in.user_name:
        if not is_valid_user_name(changes_in.user_name):
            raise ValidationError(INVALID_USER_NAME)
        _check_unique(db, user.id, user_name=changes_in.user_name)
        changes["user_name"] = changes_in.user_name
    if changes_in.full_name:
        if not is_valid_full_name(changes_in.full_name):
            raise ValidationError(INVALID_FULL_NAME)
        changes["full_name"] = changes_in.full_name
    if changes_in.email:
        if not is_valid_email(changes_in.email):
            raise ValidationError(INVALID_EMAIL)
        _check_unique(db, user.id, email=changes_in.email)
        changes["email"] = changes_in.email
    if changes_in.birthday:
        if not is_valid_birthday(changes_in.birthday):
            raise ValidationError(INVALID_BIRTHDAY)
        changes["birthday"] = parse_birthday(changes_in.birthday)

    if old_password and new_password:
        if old_password == new_password:
            raise ValidationError("PLEASE CHOOSE ANOTHER PASSWORD !")
        if not security.verify_password(old_password, user.password):
            raise AuthenticationError("Password doesn't match")
        if not is_valid_password(new_password):
            raise ValidationError(WEAK_PASSWORD)
        changes["password"] = security.get_password_hash(new_password)

    if not changes:
        raise ValidationError("NO ITEM SELECTED !")

    logger.info("Updating user %s: %s", user.id, ", ".join(sorted(changes)))
    return crud.update_user(db, user, changes)


class CodeSweeper:
    """Periodically deletes verification codes older than the expiry window.

    One daemon thread serves every reset request; lookups already ignore
    expired codes, so the sweep only bounds how long stale rows linger.
    """

    def __init__(self, session_factory, interval: float | None = None):
        self.session_factory = session_factory
        self.interval = interval if interval is not None else settings.CODE_SWEEP_INTERVAL_SECONDS
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    def sweep(self) -> int:
        db = self.session_factory()
        try:
            deleted = crud.delete_verification_codes_before(
                db, seconds_ago(settings.VERIFICATION_CODE_TTL_SECONDS)
            )
        finally:
            db.close()
        if deleted:
            logger.info("Expired %d verification code(s)", deleted)
        return deleted

    def _run(self):
        while not self._stop.wait(self.interval):
            try:
                self.sweep()
            except Exception:
                logger.exception("Verification code sweep failed")

    def start(self):
        with self._lock:
            if self._thread is not None:
                return
            self._stop.clear()
            self._thread = threading.Thread(target=self._run, name="code-sweeper", daemon=True)
            self._thread.start()
        logger.info("Code sweeper started (every %ss)", self.interval)

    def stop(self, timeout: float = 5.0):
        with self._lock:
            thread, self._thread = self._thread, None
        if thread is None:
            return
        self._stop.set()
        thread.join(timeout=timeout)
        logger.info("Code sweeper stopped")


def reset_request(db: Session, email: str, background_tasks: BackgroundTasks) -> bool:
    user = crud.get_user_by_email(db, email=email)
    if not user:
        raise NotFoundError(USER_NOT_FOUND)

    code = generate_verification_code()
    crud.delete_verification_codes(db, email=email)
    crud.create_verification_code(db, email=email, code=code)

    background_tasks.add_task(send_verification_code_email, email, code)
    logger.info("Password reset requested for %s", email)
    return True


def check_code(db: Session, email: str, code: str) -> str:
    if not _live_code(db, email, code):
        raise ValidationError("Unvalid code !")
    return CODE_OK


def delete_user(db: Session, user_id: int) -> bool:
    deleted = crud.delete_user(db, user_id)
    if deleted:
        logger.info("User %s deleted", user_id)
    return deleted


def list_users(db: Session):
    return crud.get_users(db)
