"""
Construcción del resolvedor a partir de la configuración.
"""

import logging

from .adapters import GeoIP2Adapter, GeoIP2ReaderAdapter, GeoIP2WebServiceAdapter
from .config import Settings
from .exceptions import ConfigurationError
from .resolver import GeoIPResolver

logger = logging.getLogger("geoipfinder")


def create_adapter(settings: Settings) -> GeoIP2Adapter:
    """Elige el adaptador según la configuración.

    La base de datos local tiene prioridad; si no hay, se usa el servicio web.

    Raises:
        ConfigurationError: Si no hay ni base de datos ni credenciales
    """
    if settings.database_path:
        logger.info("Usando base de datos GeoIP2: %s", settings.database_path)
        return GeoIP2ReaderAdapter.from_database(settings.database_path, settings.model)

    if settings.account_id and settings.license_key:
        logger.info("Usando servicio web GeoIP2: %s", settings.service_url)
        return GeoIP2WebServiceAdapter(
            settings.account_id,
            settings.license_key,
            url=settings.service_url,
            model=settings.model,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
        )

    raise ConfigurationError(
        "Falta configuración: defina GEOIPFINDER_DATABASE_PATH o "
        "GEOIPFINDER_ACCOUNT_ID y GEOIPFINDER_LICENSE_KEY"
    )


def create_resolver(settings: Settings | None = None, logger=None) -> GeoIPResolver:
    """Crea un GeoIPResolver listo para usar.

    Args:
        settings: Configuración (por defecto, la del entorno)
        logger: Logger opcional para el resolvedor
    """
    settings = settings or Settings()
    return GeoIPResolver(create_adapter(settings), locale=settings.locale, logger=logger)
