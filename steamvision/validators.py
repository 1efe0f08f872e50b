"""Format checks for the fields a user submits on signup or profile update.

Every predicate returns a bool and never raises; callers decide which
message to show.
"""
import re
from datetime import date

from email_validator import validate_email, EmailNotValidError

USER_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_.]{2,19}$")
NAME_WORD = r"[^\W\d_]+(?:['-][^\W\d_]+)*"
FULL_NAME_RE = re.compile(rf"^{NAME_WORD}(?: {NAME_WORD}){{1,2}}$")
BIRTHDAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MIN_PASSWORD_LENGTH = 8


def is_valid_email(email) -> bool:
    if not isinstance(email, str) or not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_user_name(user_name) -> bool:
    return isinstance(user_name, str) and bool(USER_NAME_RE.match(user_name))


def is_valid_full_name(full_name) -> bool:
    """First name, optional middle name, last name."""
    return isinstance(full_name, str) and bool(FULL_NAME_RE.match(full_name))


def is_valid_password(password) -> bool:
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        return False
    return (
        any(c.isupper() for c in password)
        and any(c.islower() for c in password)
        and any(c.isdigit() for c in password)
        and any(not c.isalnum() for c in password)
    )


def parse_birthday(birthday) -> date:
    if not isinstance(birthday, str) or not BIRTHDAY_RE.match(birthday):
        raise ValueError(f"invalid birthday: {birthday!r}")
    return date.fromisoformat(birthday)


def is_valid_birthday(birthday) -> bool:
    try:
        born = parse_birthday(birthday)
    except ValueError:
        return False
    return born <= date.today()
