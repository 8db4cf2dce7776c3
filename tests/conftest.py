import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from todo_app.core.config import Settings
from todo_app.db.repositories.todos import TodoRepository
from todo_app.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None, ENV="test", DATABASE_URL="sqlite://", LOG_LEVEL="INFO")


@pytest.fixture
def engine():
    # une seule connexion partagée : la base mémoire survit entre les sessions
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def repo(session):
    return TodoRepository(session)


@pytest.fixture
def backend_app(settings, engine):
    return create_app(settings, engine)


@pytest.fixture
def client(backend_app):
    with TestClient(backend_app) as c:
        yield c
