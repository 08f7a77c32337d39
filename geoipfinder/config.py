from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .adapters.webservice import DEFAULT_SERVICE_URL


class Settings(BaseSettings):
    """Configuración leída de variables de entorno GEOIPFINDER_*."""

    # Base de datos local (.mmdb); tiene prioridad sobre el servicio web
    database_path: str | None = None

    # Servicio web GeoIP2
    account_id: int | None = None
    license_key: str | None = None
    service_url: str = DEFAULT_SERVICE_URL
    timeout: float = Field(5, gt=0)
    max_retries: int = Field(3, ge=0)

    model: Literal["city", "country"] = "city"
    locale: str = "en"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(env_prefix="GEOIPFINDER_", extra="ignore")
