from datetime import date, timedelta

import pytest

from steamvision.validators import (
    is_valid_birthday,
    is_valid_email,
    is_valid_full_name,
    is_valid_password,
    is_valid_user_name,
    parse_birthday,
)


@pytest.mark.parametrize("email", ["ada@example.com", "first.last+tag@mail.example.org"])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["", None, "ada", "ada@", "@example.com", "ada example@x.com"])
def test_invalid_emails(email):
    assert not is_valid_email(email)


@pytest.mark.parametrize("name", ["ada", "ada_lovelace", "A.b1", "x" * 20])
def test_valid_user_names(name):
    assert is_valid_user_name(name)


@pytest.mark.parametrize("name", ["", None, "ab", "1ada", "ada lovelace", "x" * 21, "ada!"])
def test_invalid_user_names(name):
    assert not is_valid_user_name(name)


@pytest.mark.parametrize("name", ["Ada Lovelace", "Ada King Lovelace", "Jean-Luc O'Neil", "Zoë Dupré"])
def test_valid_full_names(name):
    assert is_valid_full_name(name)


@pytest.mark.parametrize("name", ["Ada", "Ada  Lovelace", "Ada B C Lovelace", "Ada L0velace", " Ada Lovelace", None])
def test_invalid_full_names(name):
    assert not is_valid_full_name(name)


def test_strong_password():
    assert is_valid_password("Str0ng!Pass")


@pytest.mark.parametrize("password", [
    "Sh0rt!",           # too short
    "str0ng!pass",      # no uppercase
    "STR0NG!PASS",      # no lowercase
    "Strong!Pass",      # no digit
    "Str0ngPass",       # no special character
    None,
])
def test_weak_passwords(password):
    assert not is_valid_password(password)


def test_birthday():
    assert is_valid_birthday("1990-12-10")
    assert parse_birthday("1990-12-10") == date(1990, 12, 10)


@pytest.mark.parametrize("birthday", ["", None, "10/12/1990", "1990-13-01", "1990-02-30", "19901210"])
def test_invalid_birthdays(birthday):
    assert not is_valid_birthday(birthday)


def test_birthday_in_future_is_rejected():
    tomorrow = date.today() + timedelta(days=1)
    assert not is_valid_birthday(tomorrow.isoformat())
