"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_todo_repository() : crée un TodoRepository à partir de la session de la requête.

get_todo_service() : crée un TodoService avec son repository injecté.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

En test, app.dependency_overrides[get_todo_service] permet d'injecter un double.
"""

from fastapi import Depends
from sqlmodel import Session

from todo_app.db.repositories.todos import TodoRepository
from todo_app.db.session import get_session
from todo_app.features.todos.services import TodoService


def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepository:
    return TodoRepository(session)


def get_todo_service(
    repo: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    return TodoService(repo)
