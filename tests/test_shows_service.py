import pytest

from steamvision import schemas
from steamvision.core.exceptions import ValidationError
from steamvision.services import shows


def _save(db, title, category="drama", thumbnail="https://cdn.example.com/t.jpg"):
    return shows.save_show(db, schemas.ShowCreate(title=title, category=category, thumbnail=thumbnail))


def test_save_show_strips_fields(db):
    show = _save(db, "  Dark  ", category=" thriller ")
    assert show.id is not None
    assert show.title == "Dark"
    assert show.category == "thriller"
    assert show.created_at is not None


@pytest.mark.parametrize("fields, message", [
    ({"title": " "}, "title"),
    ({"category": ""}, "category"),
    ({"thumbnail": "ftp://cdn.example.com/t.jpg"}, "Thumbnail"),
    ({"thumbnail": "not a url"}, "Thumbnail"),
])
def test_save_show_rejects_bad_input(db, fields, message):
    kwargs = {"title": "Dark", "category": "drama", "thumbnail": "https://cdn.example.com/t.jpg"}
    kwargs.update(fields)
    with pytest.raises(ValidationError, match=message):
        shows.save_show(db, schemas.ShowCreate(**kwargs))


def test_latest_by_category_newest_first(db):
    first = _save(db, "Dark")
    _save(db, "Friends", category="comedy")
    second = _save(db, "Chernobyl")
    third = _save(db, "Succession")

    latest = shows.latest_by_category(db, "drama", 2)
    assert [s.id for s in latest] == [third.id, second.id]
    assert first.id not in [s.id for s in latest]


def test_latest_all(db):
    _save(db, "Dark")
    _save(db, "Friends", category="comedy")
    assert {s.title for s in shows.latest_all(db, 10)} == {"Dark", "Friends"}


@pytest.mark.parametrize("size", [0, -1, 101, None])
def test_size_bounds(db, size):
    with pytest.raises(ValidationError):
        shows.latest_all(db, size)


def test_delete_show(db):
    show = _save(db, "Dark")
    assert shows.delete_show(db, show.id) is True
    assert shows.delete_show(db, show.id) is False
    assert shows.latest_all(db, 10) == []
