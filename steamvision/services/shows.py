import logging
from urllib.parse import urlparse

from sqlalchemy.orm import Session

from .. import crud, schemas
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


def _check_size(size: int):
    if size is None or not 1 <= size <= MAX_PAGE_SIZE:
        raise ValidationError(f"size must be between 1 and {MAX_PAGE_SIZE}")


def save_show(db: Session, show_in: schemas.ShowCreate):
    title = (show_in.title or "").strip()
    category = (show_in.category or "").strip()
    if not title:
        raise ValidationError("Show title is required")
    if not category:
        raise ValidationError("Show category is required")

    thumbnail = urlparse(show_in.thumbnail or "")
    if thumbnail.scheme not in ("http", "https") or not thumbnail.netloc:
        raise ValidationError("Thumbnail must be an http(s) URL")

    show = crud.create_show(db, title=title, thumbnail=show_in.thumbnail, category=category)
    logger.info("Show %s saved in %s", show.id, category)
    return show


def delete_show(db: Session, show_id: int) -> bool:
    return crud.delete_show(db, show_id)


def latest_by_category(db: Session, category: str, size: int):
    _check_size(size)
    return crud.get_latest_shows(db, size=size, category=category)


def latest_all(db: Session, size: int):
    _check_size(size)
    return crud.get_latest_shows(db, size=size)
