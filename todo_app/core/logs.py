"""
➡️ But : Configurer les logs de l’application et journaliser chaque requête entrante.

configure_logging() : un seul appel au démarrage (format horodaté, niveau depuis les settings).

log_requests : middleware HTTP qui trace méthode, chemin et corps AVANT de passer la main à la route.

🔹 Avantages :

Observabilité sans impact sur le flux de contrôle (le middleware ne modifie ni la requête ni la réponse).

Les logs sortent sur stdout : kubectl logs suffit pour les lire.
"""

import logging

from fastapi import Request

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

request_logger = logging.getLogger("todo_app.requests")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


async def log_requests(request: Request, call_next):
    # Starlette met le corps en cache : la route peut encore le relire ensuite.
    body = await request.body()
    request_logger.info(
        "%s %s %s",
        request.method,
        request.url.path,
        body.decode("utf-8", errors="replace") if body else "{}",
    )
    return await call_next(request)
