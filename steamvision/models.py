# steamvision/models.py
from sqlalchemy import Boolean, Column, Integer, String, Date, DateTime
from .core.time import utcnow
from .database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    user_name = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    birthday = Column(Date, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)


class VerificationCode(Base):
    __tablename__ = "verification_codes"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, index=True, nullable=False)
    code = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class Show(Base):
    __tablename__ = "shows"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    thumbnail = Column(String, nullable=False)
    category = Column(String, index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
