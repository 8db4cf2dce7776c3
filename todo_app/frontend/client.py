"""
➡️ But : Parler au backend (/api/todos) depuis le frontend.

TodoApiClient enveloppe un httpx.Client : list, add, toggle, delete.
Toute erreur réseau ou HTTP devient une TodoApiError.

🔹 Avantages :

Le client HTTP est injecté : en test on passe le TestClient du backend.
"""

from typing import Any, Dict, List

import httpx

from todo_app.frontend.config import FrontendSettings


class TodoApiError(Exception):
    pass


class TodoApiClient:
    def __init__(self, http: httpx.Client):
        self.http = http

    @classmethod
    def from_settings(cls, settings: FrontendSettings) -> "TodoApiClient":
        return cls(httpx.Client(base_url=settings.API_URL, timeout=settings.REQUEST_TIMEOUT))

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self.http.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TodoApiError(f"{method} {path} failed with {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TodoApiError(f"{method} {path} failed: {e}") from e
        return response

    def list_todos(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/todos").json()

    def add_todo(self, text: str) -> Dict[str, Any]:
        return self._request("POST", "/todos", json={"text": text}).json()

    def toggle_todo(self, todo_id: str, completed: bool) -> Dict[str, Any]:
        return self._request("PUT", f"/todos/{todo_id}", json={"completed": completed}).json()

    def delete_todo(self, todo_id: str) -> None:
        self._request("DELETE", f"/todos/{todo_id}")

    def close(self) -> None:
        self.http.close()
