"""
➡️ But : Définir la structure de la table des todos (ORM).

Représente l’objet persisté (ici : TodoRecord).

seq : clé primaire auto-incrémentée, interne ; suit l’ordre d’insertion et départage deux created_at égaux.

id : identifiant opaque (hex uuid4) exposé par l’API, généré à la création, jamais modifié.

text : obligatoire, non vide, immuable.

completed : seul champ modifiable après création.

created_at : horodatage UTC de création, clé de tri par défaut (desc).

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Même modèle sur SQLite (dev/tests) et PostgreSQL (cluster).
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlmodel import Field, SQLModel


def _new_id() -> str:
    return uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TodoRecord(SQLModel, table=True):
    __tablename__ = "todos"

    seq: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(default_factory=_new_id, unique=True, index=True, max_length=32)
    text: str = Field(min_length=1)
    completed: bool = False
    created_at: datetime = Field(default_factory=_utcnow, index=True)
