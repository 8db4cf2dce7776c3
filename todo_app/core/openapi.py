"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour ajouter une description détaillée (conventions de l'API).
"""

from fastapi.openapi.utils import get_openapi


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API Todo déployée sur Kubernetes (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC ; les champs JSON sont en camelCase.\n"
            "- Les erreurs ont la forme `{\"error\": \"...\"}`.\n"
            "- `GET /api/todos` sert de sonde liveness/readiness.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
