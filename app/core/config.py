"""
Central application configuration
"""
from typing import List, Optional, Union
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
import json
import os


class Settings(BaseSettings):
    """Application settings, read from the environment and the `.env` file"""

    # Application
    APP_NAME: str = "Student Result Management"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # Firebase
    # Either the service account JSON content or a path to the JSON file
    FIREBASE_CREDENTIALS_JSON: Optional[str] = None
    FIREBASE_WEB_API_KEY: str = ""
    FIREBASE_AUTH_BASE_URL: str = "https://identitytoolkit.googleapis.com/v1"
    AUTH_HTTP_TIMEOUT: float = 10.0

    # Hardcoded student/lecturer logins kept for the demo front-end
    DEMO_LOGINS_ENABLED: bool = True

    # CORS (comma separated string or JSON list)
    BACKEND_CORS_ORIGINS: Union[List[str], str] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if v is None or v == "":
            return []
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        raise ValueError(v)

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env"),
        case_sensitive=True,
        extra="ignore",  # ignore unrelated variables in .env
    )


# Single instance for the application
settings = Settings()
