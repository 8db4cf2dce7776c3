"""
➡️ But : Servir l’interface web des todos.

GET / : récupère TOUTE la liste auprès du backend et l’affiche.

POST /todos, /todos/{id}/toggle, /todos/{id}/delete : une mutation puis redirection vers /,
donc un nouveau chargement complet de la liste (pas de cache local, pas de mise à jour optimiste).

Une saisie vide est refusée avant tout appel réseau.

🔹 Avantages :

L’affichage correspond toujours à l’état du serveur.

Les erreurs sont loggées et affichées dans un bandeau, sans casser la page.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from todo_app.core.logs import configure_logging
from todo_app.frontend.client import TodoApiClient, TodoApiError
from todo_app.frontend.config import FrontendSettings

logger = logging.getLogger("todo_app.frontend")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def get_api(request: Request) -> TodoApiClient:
    return request.app.state.api


# seuls ces types d'erreur peuvent apparaître dans le bandeau
ERROR_MESSAGES = {
    "fetch": "Could not load todos, see server logs.",
    "add": "Could not add the todo, see server logs.",
    "update": "Could not update the todo, see server logs.",
    "delete": "Could not delete the todo, see server logs.",
}


def _back_to_list(error: Optional[str] = None) -> RedirectResponse:
    url = "/" if error is None else f"/?error={error}"
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def create_frontend_app(
    settings: Optional[FrontendSettings] = None,
    api: Optional[TodoApiClient] = None,
) -> FastAPI:
    settings = settings or FrontendSettings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.api.close()

    app = FastAPI(title="Kubernetes Todo Frontend", lifespan=lifespan, docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.state.api = api or TodoApiClient.from_settings(settings)

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request, error: Optional[str] = None, api: TodoApiClient = Depends(get_api)):
        todos = []
        try:
            todos = api.list_todos()
        except TodoApiError as e:
            logger.error("Error fetching todos: %s", e)
            error = "fetch"
        return templates.TemplateResponse(
            request,
            "index.html",
            {"title": settings.APP_TITLE, "todos": todos, "error": ERROR_MESSAGES.get(error)},
        )

    @app.post("/todos")
    def add_todo(text: str = Form(""), api: TodoApiClient = Depends(get_api)):
        if not text.strip():
            return _back_to_list()
        try:
            api.add_todo(text)
        except TodoApiError as e:
            logger.error("Error adding todo: %s", e)
            return _back_to_list("add")
        return _back_to_list()

    @app.post("/todos/{todo_id}/toggle")
    def toggle_todo(todo_id: str, completed: bool = Form(False), api: TodoApiClient = Depends(get_api)):
        # `completed` est l'état affiché : on envoie son inverse
        try:
            api.toggle_todo(todo_id, not completed)
        except TodoApiError as e:
            logger.error("Error updating todo: %s", e)
            return _back_to_list("update")
        return _back_to_list()

    @app.post("/todos/{todo_id}/delete")
    def delete_todo(todo_id: str, api: TodoApiClient = Depends(get_api)):
        try:
            api.delete_todo(todo_id)
        except TodoApiError as e:
            logger.error("Error deleting todo: %s", e)
            return _back_to_list("delete")
        return _back_to_list()

    return app


def run() -> None:
    settings = FrontendSettings()
    uvicorn.run(create_frontend_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
