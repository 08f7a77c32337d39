"""
Adaptador para el servicio web GeoIP2 Precision (API REST de MaxMind).

Usa una sesión de requests con reintentos automáticos para errores
transitorios (429 y 5xx).
"""

import logging

import requests
from requests.adapters import HTTPAdapter
from requests.exceptions import ConnectionError, RequestException, Timeout
from urllib3.util.retry import Retry

from ..exceptions import (
    ConfigurationError,
    NoResult,
    ServiceConnectionError,
    ServiceError,
    ServiceHTTPError,
    ServiceTimeoutError,
)
from ..models import GeoRecord
from .base import GeoIP2Adapter
from .reader import SUPPORTED_MODELS

DEFAULT_SERVICE_URL = "https://geoip.maxmind.com/geoip/v2.1"

# Códigos de error del servicio que significan "no hay datos para esta IP"
NO_RESULT_CODES = {"IP_ADDRESS_NOT_FOUND", "IP_ADDRESS_RESERVED"}

log = logging.getLogger("geoipfinder.adapters")


class GeoIP2WebServiceAdapter(GeoIP2Adapter):
    """Cliente del servicio web GeoIP2 con retry logic automático.

    Attributes:
        url: URL base del servicio
        model: Endpoint de consulta ("city" o "country")
        timeout: Timeout en segundos para las peticiones
        session: Sesión de requests con retry logic configurado

    Example:
        adapter = GeoIP2WebServiceAdapter(42, "license-key")
        record = adapter.set_locale("en").get_content("8.8.8.8")
    """

    def __init__(
        self,
        account_id,
        license_key,
        url=DEFAULT_SERVICE_URL,
        model="city",
        timeout=5,
        max_retries=3,
        session=None,
    ):
        """Configura la conexión al servicio.

        Args:
            account_id: Identificador de cuenta MaxMind
            license_key: Clave de licencia
            url: URL base del servicio
            model: Endpoint de consulta (default: "city")
            timeout: Timeout en segundos (default: 5)
            max_retries: Número máximo de reintentos (default: 3)
            session: Sesión de requests externa opcional. El adaptador NO la cerrará.

        Raises:
            ConfigurationError: Si faltan credenciales o el modelo no está soportado
        """
        super().__init__()
        if not account_id or not license_key:
            raise ConfigurationError("El servicio web GeoIP2 necesita account_id y license_key")
        if model not in SUPPORTED_MODELS:
            raise ConfigurationError(
                "Modelo GeoIP2 no soportado",
                details={"model": model, "supported": ",".join(SUPPORTED_MODELS)}
            )

        self.url = url + ("" if url.endswith("/") else "/")
        self.model = model
        self.timeout = timeout
        self.last_request = None

        if session is not None:
            self.session = session
            self._owns_session = False
        else:
            self.session = requests.Session()
            retry_strategy = Retry(
                total=max_retries,
                backoff_factor=0.3,  # 0.3s, 0.6s, 1.2s entre reintentos
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)
            self._owns_session = True

        self.session.auth = (str(account_id), license_key)
        self.session.headers.update({"Accept": "application/json"})

    def get_content(self, ip: str) -> GeoRecord:
        """Consulta el servicio para una IP.

        Raises:
            NoResult: Si el servicio no tiene datos para la IP
            ServiceTimeoutError: Si la petición excede el timeout
            ServiceConnectionError: Si hay error de conexión
            ServiceHTTPError: Si el servicio responde con otro error HTTP
            ServiceError: Si la respuesta no es JSON válido
        """
        url = f"{self.url}{self.model}/{ip}"
        self.last_request = url
        headers = {"Accept-Language": self.locale} if self.locale else {}

        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
        except Timeout as e:
            raise ServiceTimeoutError(
                f"Timeout después de {self.timeout}s",
                url=url,
                details={"timeout": self.timeout}
            ) from e
        except ConnectionError as e:
            raise ServiceConnectionError("Error de conexión con el servidor", url=url) from e
        except RequestException as e:
            raise ServiceError(f"Error en la petición GeoIP2: {e}", url=url) from e

        self.last_request = response.url

        if response.status_code != 200:
            self._raise_for_error(ip, url, response)

        try:
            data = response.json()
        except ValueError as e:
            raise ServiceError(f"Error parseando respuesta JSON: {e}", url=url) from e

        log.debug("GeoIP2 web service %s lookup for %s (locale=%s)", self.model, ip, self.locale)
        return GeoRecord.from_raw(data)

    @staticmethod
    def _raise_for_error(ip, url, response):
        """Traduce una respuesta de error del servicio a la excepción adecuada."""
        try:
            code = response.json().get("code")
        except (ValueError, AttributeError):
            code = None

        if response.status_code == 404 or code in NO_RESULT_CODES:
            raise NoResult.for_ip(ip)

        raise ServiceHTTPError(
            f"Error HTTP {response.status_code} en el servicio GeoIP2",
            url=url,
            status_code=response.status_code,
            response_text=response.text,
            details={"code": code} if code else None,
        )

    def last_sent(self):
        """Retorna la última petición ejecutada (útil para debug)."""
        return self.last_request

    def close(self):
        """Cierra la sesión de requests si la creó este adaptador."""
        if self._owns_session:
            self.session.close()
