from ariadne import MutationType, ObjectType, QueryType

from .. import schemas
from ..services import shows
from .context import get_db, parse_id, require_admin

query = QueryType()
mutation = MutationType()
show = ObjectType("Show")


@show.field("createdAt")
def resolve_created_at(obj, *_):
    return obj.created_at.isoformat()


@query.field("getMoviesByCategory")
@query.field("getLatestMoviesByCategory")
def resolve_movies_by_category(_, info, category, size=20):
    return shows.latest_by_category(get_db(info), category, size)


@query.field("getLatestAll")
def resolve_latest_all(_, info, size=20):
    return shows.latest_all(get_db(info), size)


@mutation.field("saveShow")
def resolve_save_show(_, info, **kwargs):
    require_admin(info)
    return shows.save_show(get_db(info), schemas.ShowCreate.model_validate(kwargs))


@mutation.field("deleteMovie")
def resolve_delete_movie(_, info, id=None):
    require_admin(info)
    return shows.delete_show(get_db(info), parse_id(id))
