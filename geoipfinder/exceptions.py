"""
Jerarquía de excepciones personalizada para GeoIPFinder.

Todas las excepciones de GeoIPFinder heredan de GeoIPFinderError, permitiendo
capturar todos los errores de la librería con un solo except.
"""

from typing import Optional, Dict, Any

__all__ = [
    "GeoIPFinderError",
    "UnsupportedOperation",
    "NoResult",
    "ConfigurationError",
    "ParsingError",
    "ServiceError",
    "ServiceConnectionError",
    "ServiceTimeoutError",
    "ServiceHTTPError",
]


class GeoIPFinderError(Exception):
    """Clase base para todas las excepciones de GeoIPFinder.

    Attributes:
        message: Mensaje de error principal
        details: Diccionario opcional con contexto adicional del error
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Formatea el mensaje de error con detalles si están disponibles."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        if self.details:
            return f"{class_name}(message={self.message!r}, details={self.details!r})"
        return f"{class_name}(message={self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la excepción a diccionario para serialización JSON.

        Returns:
            dict: Diccionario con type, message y details de la excepción
        """
        result = {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details.copy(),
        }

        if getattr(self, "ip", None):
            result["ip"] = self.ip
        if getattr(self, "url", None):
            result["url"] = self.url
        if getattr(self, "status_code", None) is not None:
            result["status_code"] = self.status_code

        return result


class UnsupportedOperation(GeoIPFinderError):
    """Operación no soportada por el proveedor.

    Se lanza de forma síncrona, sin consultar al adaptador, cuando:
    - Se pide geocodificación inversa (lat/lon -> dirección)
    - La consulta directa no es una dirección IP (p.ej. una dirección postal)

    Nunca se reintenta: indica un uso incorrecto del proveedor.

    Example:
        raise UnsupportedOperation(
            "The GeoIP2 provider is not able to do reverse geocoding."
        )
    """
    pass


class NoResult(GeoIPFinderError):
    """La base de datos no tiene ninguna entrada para una IP válida.

    La lanza el adaptador y el resolvedor la propaga sin modificarla.

    Attributes:
        ip: Dirección IP consultada
    """

    def __init__(self, message: str, ip: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.ip = ip

    @classmethod
    def for_ip(cls, ip: str) -> "NoResult":
        """Construye la excepción con el mensaje estándar para una IP."""
        return cls(f"No results found for IP address {ip}", ip=ip)


class ConfigurationError(GeoIPFinderError):
    """Error de configuración del resolvedor o de sus adaptadores.

    Se lanza cuando hay problemas con la configuración inicial:
    - Ruta de la base de datos inexistente
    - Modelo GeoIP2 no soportado
    - Credenciales del servicio web ausentes

    Example:
        raise ConfigurationError(
            "No existe la base de datos GeoIP2",
            details={"path": path}
        )
    """
    pass


class ParsingError(GeoIPFinderError):
    """Error al interpretar el contenido devuelto por el adaptador.

    Se lanza cuando el registro crudo no puede convertirse en un GeoRecord:
    - JSON mal formado
    - Tipo de dato inesperado (ni dict, ni texto, ni None)
    """
    pass


class ServiceError(GeoIPFinderError):
    """Clase base para errores del servicio o base de datos subyacente.

    Attributes:
        message: Mensaje de error
        details: Contexto adicional
        url: URL que causó el error (si está disponible)
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, url: Optional[str] = None):
        super().__init__(message, details)
        self.url = url
        if url:
            self.details["url"] = url


class ServiceConnectionError(ServiceError):
    """Error de conexión con el servicio web GeoIP2.

    Example:
        raise ServiceConnectionError(
            "Error de conexión con el servidor",
            url="https://geoip.maxmind.com/geoip/v2.1/city/8.8.8.8"
        )
    """
    pass


class ServiceTimeoutError(ServiceError):
    """Timeout en la petición al servicio web GeoIP2."""
    pass


class ServiceHTTPError(ServiceError):
    """Error HTTP del servicio web GeoIP2.

    Attributes:
        status_code: Código de estado HTTP
        response_text: Texto de la respuesta del servidor
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message, details, url)
        self.status_code = status_code
        self.response_text = response_text

        if status_code is not None:
            self.details["status_code"] = status_code
        if response_text:
            self.details["response_text"] = response_text[:200]  # Limitar longitud
