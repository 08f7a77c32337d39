"""
Contrato de los adaptadores de datos GeoIP2.

El resolvedor solo conoce esta interfaz: fija el idioma y pide el contenido
de una IP. Cualquier implementación (base de datos local, servicio web o un
doble de test) es intercambiable.
"""

from abc import ABC, abstractmethod

from ..models import GeoRecord


class GeoIP2Adapter(ABC):
    """Adaptador que entrega registros GeoIP2 crudos para una IP.

    El idioma es estado del adaptador: debe fijarse justo antes de cada
    petición de contenido. Compartir una instancia entre hilos exige que el
    llamante serialice los pares set_locale + get_content.

    Attributes:
        locale: Idioma activo para las siguientes peticiones
    """

    def __init__(self):
        self.locale = None

    def set_locale(self, locale):
        """Configura el idioma de las siguientes peticiones.

        Returns:
            GeoIP2Adapter: El propio adaptador (encadenable)
        """
        self.locale = locale
        return self

    @abstractmethod
    def get_content(self, ip: str) -> GeoRecord:
        """Obtiene el registro de geolocalización de una IP.

        Args:
            ip: Dirección IPv4 o IPv6 ya validada

        Returns:
            GeoRecord: Registro (posiblemente vacío)

        Raises:
            NoResult: Si no hay ninguna entrada para la IP
            ServiceError: Si hay problemas de conexión o de formato
        """
        raise NotImplementedError

    def close(self):
        """Libera los recursos del adaptador."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
