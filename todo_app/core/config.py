"""
➡️ But : Centraliser tous les paramètres configurables du backend (nom d’app, URL de la base, port, CORS…)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système, ConfigMap Kubernetes…).

Fournit une fonction get_settings() (mise en cache) que l’application factory utilise :

from todo_app.core.config import get_settings
print(get_settings().DATABASE_URL)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test) et entre SQLite (local) et PostgreSQL (cluster).
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Kubernetes Todo API"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # Server
    # -----------------------------
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "todoapp.db"  # fichier SQLite (dev local)
    # Dans le cluster : DATABASE_URL vient de la ConfigMap todo-config.
    DATABASE_URL: Optional[str] = None

    # -----------------------------
    # Logs / CORS
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    # ⚠️ "*" accepte toutes les origines : acceptable uniquement hors production.
    CORS_ORIGINS: List[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    def model_post_init(self, __context):
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")


@lru_cache
def get_settings() -> Settings:
    return Settings()
