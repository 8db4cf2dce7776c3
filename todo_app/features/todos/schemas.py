"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

TodoCreate → corps de requête POST {"text": ...}

TodoToggle → corps PUT {"completed": ...}

TodoOut → réponse de l’API {"id", "text", "completed", "createdAt"}

Sépare le modèle "de stockage" (TodoRecord) de ceux "de transfert" (I/O API).

🔹 Avantages :

Validation à la frontière, avant toute persistance.

Le format JSON (camelCase) ne dépend pas de la base utilisée.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel


class TodoCreate(BaseModel):
    text: str = Field(..., min_length=1, examples=["Learn Kubernetes!"])

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be blank")
        return v


class TodoToggle(BaseModel):
    completed: StrictBool = Field(..., examples=[True])


class TodoOut(BaseModel):
    id: str
    text: str
    completed: bool
    created_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
