"""
➡️ But : Paramètres du frontend, figés au moment du build de l’image.

L’URL de l’API est écrite dans frontend.build.env par le Dockerfile (ARG API_URL).
Les variables d’environnement du conteneur sont volontairement ignorées : modifier
la ConfigMap n’a aucun effet sur une image déjà construite, il faut la reconstruire.
"""

from typing import Tuple, Type

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

BUILD_ENV_FILE = "frontend.build.env"


class FrontendSettings(BaseSettings):
    APP_TITLE: str = "🚀 Kubernetes Todo App"
    API_URL: str = "http://localhost:5000/api"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    REQUEST_TIMEOUT: float = 5.0
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": BUILD_ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # pas de env_settings : seule la valeur figée au build compte
        return init_settings, dotenv_settings
