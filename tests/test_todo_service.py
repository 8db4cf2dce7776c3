from datetime import datetime, timedelta, timezone

import pytest

from todo_app.db.models.todos import TodoRecord
from todo_app.features.todos.services import TodoNotFound, TodoService


class FakeTodoRepository:
    """Repository en mémoire : le service ne voit aucune différence."""

    def __init__(self):
        self.items = {}
        self._clock = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def list_newest_first(self):
        return sorted(self.items.values(), key=lambda t: t.created_at, reverse=True)

    def create(self, **fields):
        self._clock += timedelta(seconds=1)
        todo = TodoRecord(created_at=self._clock, **fields)
        self.items[todo.id] = todo
        return todo

    def set_completed(self, todo_id, completed):
        todo = self.items.get(todo_id)
        if todo is not None:
            todo.completed = completed
        return todo

    def delete_by_id(self, todo_id):
        return self.items.pop(todo_id, None) is not None


@pytest.fixture
def svc():
    return TodoService(FakeTodoRepository())


def test_create_assigns_id_and_defaults(svc):
    todo = svc.create("Learn Kubernetes!")
    assert todo.id
    assert todo.completed is False
    assert todo.created_at is not None


def test_ids_are_unique(svc):
    ids = {svc.create(f"todo {i}").id for i in range(50)}
    assert len(ids) == 50


def test_list_is_newest_first(svc):
    first = svc.create("first")
    second = svc.create("second")
    assert [t.id for t in svc.list()] == [second.id, first.id]


def test_set_completed_changes_only_completed(svc):
    todo = svc.create("keep me")
    created_at = todo.created_at

    updated = svc.set_completed(todo.id, True)

    assert updated.completed is True
    assert updated.text == "keep me"
    assert updated.created_at == created_at


def test_set_completed_unknown_raises(svc):
    with pytest.raises(TodoNotFound):
        svc.set_completed("nope", True)


def test_delete_unknown_is_silent(svc):
    todo = svc.create("bye")
    svc.delete(todo.id)
    svc.delete(todo.id)
    assert svc.list() == []
