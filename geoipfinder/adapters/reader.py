"""
Adaptador para bases de datos GeoIP2 / GeoLite2 (.mmdb) locales.
"""

import logging
from pathlib import Path

import geoip2.database
import geoip2.errors
from maxminddb import InvalidDatabaseError

from ..exceptions import ConfigurationError, NoResult, ParsingError, ServiceError
from ..models import GeoRecord
from .base import GeoIP2Adapter

SUPPORTED_MODELS = ("city", "country")

log = logging.getLogger("geoipfinder.adapters")


class GeoIP2ReaderAdapter(GeoIP2Adapter):
    """Adaptador sobre un lector geoip2 (database.Reader o compatible).

    Cualquier objeto con los métodos city(ip) y country(ip) que devuelvan
    modelos geoip2 (con el método to_dict) sirve como lector.

    Example:
        with GeoIP2ReaderAdapter.from_database("GeoLite2-City.mmdb") as adapter:
            record = adapter.set_locale("de").get_content("74.200.247.59")

    Attributes:
        reader: Lector geoip2 subyacente
        model: Modelo de consulta ("city" o "country")
    """

    def __init__(self, reader, model="city"):
        """Configura el adaptador.

        Args:
            reader: Lector geoip2 ya abierto
            model: Modelo de consulta, "city" (default) o "country"

        Raises:
            ConfigurationError: Si el modelo no está soportado
        """
        super().__init__()
        if model not in SUPPORTED_MODELS:
            raise ConfigurationError(
                "Modelo GeoIP2 no soportado",
                details={"model": model, "supported": ",".join(SUPPORTED_MODELS)}
            )
        self.reader = reader
        self.model = model
        self._owns_reader = False

    @classmethod
    def from_database(cls, path, model="city") -> "GeoIP2ReaderAdapter":
        """Abre una base de datos .mmdb y crea el adaptador que la posee.

        Raises:
            ConfigurationError: Si el fichero no existe o no es una base de datos válida
        """
        db_path = Path(path)
        if not db_path.is_file():
            raise ConfigurationError(
                "No existe la base de datos GeoIP2",
                details={"path": str(db_path)}
            )
        try:
            reader = geoip2.database.Reader(str(db_path))
        except (InvalidDatabaseError, OSError) as e:
            raise ConfigurationError(
                f"No se puede abrir la base de datos GeoIP2: {e}",
                details={"path": str(db_path)}
            ) from e

        adapter = cls(reader, model)
        adapter._owns_reader = True
        return adapter

    def get_content(self, ip: str) -> GeoRecord:
        lookup = getattr(self.reader, self.model)
        try:
            response = lookup(ip)
        except geoip2.errors.AddressNotFoundError as e:
            raise NoResult.for_ip(ip) from e
        except geoip2.errors.GeoIP2Error as e:
            raise ServiceError(
                f"Error consultando la base de datos GeoIP2: {e}",
                details={"ip": ip, "model": self.model}
            ) from e
        except ValueError as e:
            raise ParsingError(
                f"Dirección IP rechazada por el lector: {e}",
                details={"ip": ip}
            ) from e

        log.debug("GeoIP2 %s lookup for %s (locale=%s)", self.model, ip, self.locale)
        return GeoRecord.from_raw(response.to_dict())

    def close(self):
        """Cierra el lector solo si lo abrió este adaptador."""
        if self._owns_reader and self.reader is not None:
            self.reader.close()
            self._owns_reader = False
