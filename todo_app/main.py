"""
➡️ But : assembler toutes les pièces du backend.

create_app() construit l’instance FastAPI à partir de settings et d’un engine explicites.

Configure :

CORS (toutes origines acceptées : démo hors frontière de confiance)

log de chaque requête (méthode, chemin, corps)

gestion homogène des erreurs {"error": ...}

schéma OpenAPI personnalisé

Inclut le router /api/todos.

Initialise la table au démarrage.

🔹 Avantages :

Aucun handle de base global : les tests passent leur propre engine.

Point unique d’exécution : python -m todo_app.main (ou uvicorn --factory todo_app.main:create_app).
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from todo_app.api.routers import todos
from todo_app.core.config import Settings, get_settings
from todo_app.core.errors import register_exception_handlers
from todo_app.core.logs import configure_logging, log_requests
from todo_app.core.openapi import custom_openapi
from todo_app.db.session import build_engine, init_db


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    # Démarrage : création de la table sur l'engine injecté
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(app.state.engine)
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "todos", "description": "Opérations CRUD sur les todos"},
        ],
    )

    app.state.settings = settings
    app.state.engine = engine or build_engine(settings.DATABASE_URL, echo=(settings.ENV == "dev"))

    # CORS : "*" uniquement hors production
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    # Routers
    app.include_router(todos.router, prefix="/api")

    app.openapi = lambda: custom_openapi(app)

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "todo_app.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=(settings.ENV == "dev"),
    )


if __name__ == "__main__":
    run()
