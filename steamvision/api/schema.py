from ariadne import format_error as default_format_error, make_executable_schema
from graphql import GraphQLError

from ..core.exceptions import ServiceError
from . import shows, users
from .type_defs import type_defs


def format_error(error: GraphQLError, debug: bool = False) -> dict:
    formatted = default_format_error(error, debug)
    if isinstance(error.original_error, ServiceError):
        extensions = formatted.get("extensions") or {}
        extensions["code"] = error.original_error.code
        formatted["extensions"] = extensions
    return formatted


schema = make_executable_schema(
    type_defs,
    users.query,
    users.mutation,
    users.user,
    shows.query,
    shows.mutation,
    shows.show,
)
