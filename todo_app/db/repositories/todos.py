"""
➡️ But : Encapsuler toutes les opérations de base de données sur les todos.

Ne contient aucune logique métier, juste de la persistance.

🔹 Avantages :

Les services n’ont pas à savoir quelle base est derrière (SQLite, PostgreSQL…).

Testable indépendamment (un faux repo suffit pour tester le service).
"""

from typing import Optional, Sequence

from sqlmodel import select

from todo_app.db.models.todos import TodoRecord
from todo_app.db.repositories.base import BaseRepository


class TodoRepository(BaseRepository[TodoRecord]):
    model = TodoRecord

    def get(self, todo_id: str) -> Optional[TodoRecord]:
        # l'id public n'est pas la clé primaire (seq)
        return self.session.exec(select(TodoRecord).where(TodoRecord.id == todo_id)).first()

    def list_newest_first(self) -> Sequence[TodoRecord]:
        # à created_at égal, le dernier inséré d'abord
        return self.list(TodoRecord.created_at.desc(), TodoRecord.seq.desc())

    def set_completed(self, todo_id: str, completed: bool) -> Optional[TodoRecord]:
        todo = self.get(todo_id)
        if todo is None:
            return None
        return self.update(todo, completed=completed)

    def delete_by_id(self, todo_id: str) -> bool:
        """Supprime au plus un todo ; retourne False si l'id n'existait pas."""
        todo = self.get(todo_id)
        if todo is None:
            return False
        self.delete(todo)
        return True
