"""
➡️ But : Définir les endpoints de l’API todos.

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

🔹 Avantages :

Automatiquement documentée dans Swagger.

Les routes ne contiennent ni SQL ni logique métier. GET /api/todos sert aussi de sonde liveness/readiness.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from todo_app.api.dependencies import get_todo_service
from todo_app.features.todos.schemas import TodoCreate, TodoOut, TodoToggle
from todo_app.features.todos.services import TodoNotFound, TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={
        400: {"description": "Validation error"},
        500: {"description": "Store unavailable"},
    },
)


@router.get(
    "",
    summary="Lister les todos",
    description="Retourne tous les todos, du plus récent au plus ancien.",
    response_model=List[TodoOut],
    responses={
        200: {
            "description": "Liste triée (createdAt desc)",
            "content": {
                "application/json": {
                    "example": [{"id": "3f2b9c0e5d7a4e8f9a1b2c3d4e5f6a7b", "text": "Learn Kubernetes!",
                                 "completed": False, "createdAt": "2025-01-01T10:00:00Z"}]
                }
            },
        }
    },
)
def list_todos(svc: TodoService = Depends(get_todo_service)):
    return svc.list()


@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
)
def create_todo(payload: TodoCreate, svc: TodoService = Depends(get_todo_service)):
    return svc.create(text=payload.text)


@router.put(
    "/{todo_id}",
    summary="Marquer un todo comme terminé ou non",
    response_model=TodoOut,
    responses={400: {"description": "Todo introuvable ou corps invalide"}},
)
def toggle_todo(todo_id: str, payload: TodoToggle, svc: TodoService = Depends(get_todo_service)):
    try:
        return svc.set_completed(todo_id, payload.completed)
    except TodoNotFound as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    description="Idempotent : répond 204 même si le todo n’existe pas.",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_todo(todo_id: str, svc: TodoService = Depends(get_todo_service)):
    svc.delete(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
