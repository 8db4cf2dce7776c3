"""
➡️ But : Construire le handle vers la base et gérer les sessions.

build_engine() : connexion à la base (SQLite en local, PostgreSQL dans le cluster).

init_db() : crée la table des todos à partir du modèle SQLModel.

get_session() : dépendance FastAPI qui ouvre une session sur l’engine injecté dans app.state, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Pas de connexion globale au niveau module : l’engine est construit par l’application factory et peut être remplacé en test.

Réutilisable par injection (Depends(get_session)).
"""

import logging
from typing import Any, Dict

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine

# Import du modèle pour que create_all connaisse la table
from todo_app.db.models.todos import TodoRecord  # noqa: F401

logger = logging.getLogger("todo_app.db")


def build_engine(url: str, *, echo: bool = False) -> Engine:
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    return create_engine(
        url,
        echo=echo,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres ; inutile pour SQLite
    )


def init_db(engine: Engine) -> None:
    """
    Crée les tables si elles n'existent pas et vérifie la connexion.
    Une base injoignable au démarrage est loggée mais ne bloque pas le process :
    les requêtes répondront 500 et la readiness probe retirera le pod du service.
    """
    try:
        SQLModel.metadata.create_all(engine)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Database connection error: %s", exc)
        return
    logger.info("Connected to database")


def get_session(request: Request):
    """
    Dépendance FastAPI : fournit une session par requête, ouverte sur
    l'engine que create_app() a placé dans app.state.
    """
    with Session(request.app.state.engine) as session:
        yield session
