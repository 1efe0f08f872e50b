from ariadne import graphql_sync
from ariadne.explorer import ExplorerGraphiQL
from fastapi import APIRouter, BackgroundTasks, Body, Depends, Request, Response, status
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from ..api.schema import format_error, schema
from ..core.config import settings
from ..database import get_db

router = APIRouter()

explorer = ExplorerGraphiQL(title="SteamVision API")


@router.get("/graphql", response_class=HTMLResponse)
def graphql_explorer():
    return explorer.html(None)


@router.post("/graphql")
def graphql_server(
        request: Request,
        response: Response,
        background_tasks: BackgroundTasks,
        data: dict = Body(...),
        db: Session = Depends(get_db)
):
    success, result = graphql_sync(
        schema,
        data,
        context_value={
            "request": request,
            "response": response,
            "background_tasks": background_tasks,
            "db": db,
        },
        debug=settings.DEBUG,
        error_formatter=format_error,
    )
    if not success or result.get("errors"):
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result
