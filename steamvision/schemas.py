from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(CamelModel):
    full_name: Optional[str] = None
    user_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    password_confirmation: Optional[str] = None
    birthday: Optional[str] = None
    is_admin: Optional[bool] = None


class UserUpdate(CamelModel):
    user_name: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    birthday: Optional[str] = None


class PasswordUpdate(CamelModel):
    email: Optional[str] = None
    old_password: Optional[str] = None
    new_password: Optional[str] = None
    code: Optional[str] = None


class ShowCreate(CamelModel):
    title: Optional[str] = None
    thumbnail: Optional[str] = None
    category: Optional[str] = None


class TokenData(CamelModel):
    id: int
    full_name: str
    email: str
    username: str
    is_admin: bool = False
