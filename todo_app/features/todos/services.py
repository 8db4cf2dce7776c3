"""
➡️ But : Contenir la logique métier des todos : orchestrer le repo, appliquer les règles.

TodoService reçoit son repository par injection (aucune connexion globale).

Règles :

la liste est toujours triée du plus récent au plus ancien ;

seul `completed` peut changer après création ;

la suppression est idempotente (un id inconnu n'est pas une erreur).

🔹 Avantages :

Code métier découplé du web (aucune HTTPException ici).

Test unitaire possible avec un faux repository.
"""

import logging
from typing import Sequence

from todo_app.db.models.todos import TodoRecord
from todo_app.db.repositories.todos import TodoRepository

logger = logging.getLogger("todo_app.todos")


class TodoNotFound(LookupError):
    pass


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def list(self) -> Sequence[TodoRecord]:
        todos = self.repo.list_newest_first()
        logger.info("Fetched todos: %d", len(todos))
        return todos

    def create(self, text: str) -> TodoRecord:
        logger.info("Creating todo with text: %s", text)
        todo = self.repo.create(text=text)
        logger.info("Todo created: %s", todo.id)
        return todo

    def set_completed(self, todo_id: str, completed: bool) -> TodoRecord:
        todo = self.repo.set_completed(todo_id, completed)
        if todo is None:
            raise TodoNotFound("Todo not found.")
        return todo

    def delete(self, todo_id: str) -> None:
        if not self.repo.delete_by_id(todo_id):
            logger.info("Delete of unknown todo %s ignored", todo_id)
