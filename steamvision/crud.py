# steamvision/crud.py
from datetime import datetime
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session
from . import models
from .core.time import utcnow


def get_user(db: Session, user_id: int):
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_email(db: Session, email: str):
    return db.query(models.User).filter(models.User.email == email).first()


def get_user_by_username(db: Session, user_name: str):
    return db.query(models.User).filter(models.User.user_name == user_name).first()


def get_user_by_email_or_username(db: Session, email: str, user_name: str):
    return db.query(models.User).filter(
        or_(models.User.email == email, models.User.user_name == user_name)
    ).first()


def get_users(db: Session):
    return db.query(models.User).order_by(models.User.id).all()


def create_user(db: Session, **fields):
    db_user = models.User(**fields)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_user(db: Session, db_user: models.User, changes: dict):
    for key, value in changes.items():
        setattr(db_user, key, value)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_password_by_email(db: Session, email: str, password: str):
    db.query(models.User).filter(models.User.email == email).update({"password": password})
    db.commit()


def delete_user(db: Session, user_id: int) -> bool:
    deleted = db.query(models.User).filter(models.User.id == user_id).delete()
    db.commit()
    return deleted > 0


def get_verification_code(db: Session, email: str, code: str, created_after: Optional[datetime] = None):
    query = db.query(models.VerificationCode).filter(
        models.VerificationCode.email == email,
        models.VerificationCode.code == code,
    )
    if created_after is not None:
        query = query.filter(models.VerificationCode.created_at > created_after)
    return query.first()


def create_verification_code(db: Session, email: str, code: str):
    db_code = models.VerificationCode(email=email, code=code, created_at=utcnow())
    db.add(db_code)
    db.commit()
    db.refresh(db_code)
    return db_code


def delete_verification_codes(db: Session, email: str) -> int:
    deleted = db.query(models.VerificationCode).filter(models.VerificationCode.email == email).delete()
    db.commit()
    return deleted


def delete_verification_code(db: Session, email: str, code: str) -> int:
    deleted = db.query(models.VerificationCode).filter(
        models.VerificationCode.email == email,
        models.VerificationCode.code == code,
    ).delete()
    db.commit()
    return deleted


def delete_verification_codes_before(db: Session, created_before: datetime) -> int:
    deleted = db.query(models.VerificationCode).filter(
        models.VerificationCode.created_at <= created_before
    ).delete()
    db.commit()
    return deleted


def create_show(db: Session, **fields):
    db_show = models.Show(**fields)
    db.add(db_show)
    db.commit()
    db.refresh(db_show)
    return db_show


def delete_show(db: Session, show_id: int) -> bool:
    deleted = db.query(models.Show).filter(models.Show.id == show_id).delete()
    db.commit()
    return deleted > 0


def get_latest_shows(db: Session, size: int, category: Optional[str] = None):
    query = db.query(models.Show)
    if category is not None:
        query = query.filter(models.Show.category == category)
    return query.order_by(models.Show.created_at.desc(), models.Show.id.desc()).limit(size).all()
