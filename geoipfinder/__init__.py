"""
GeoIPFinder - Geolocalización de direcciones IP
===============================================

Paquete Python para resolver direcciones IP a direcciones jerárquicas
(país -> región -> condado -> localidad) con datos GeoIP2 / GeoLite2.

Uso:
    from geoipfinder import GeoIPResolver, GeoIP2ReaderAdapter

    adapter = GeoIP2ReaderAdapter.from_database("GeoLite2-City.mmdb")
    with GeoIPResolver(adapter) as resolver:
        address = resolver.resolve_forward("74.200.247.59", "de")[0]
        print(address.locality, address.region.code, address.country.name)

    # O a partir de variables de entorno GEOIPFINDER_*
    from geoipfinder import create_resolver
    resolver = create_resolver()

Operaciones no soportadas:
    - Direcciones postales: "Street 123, Somewhere"
    - Geocodificación inversa: resolve_reverse(lat, lon)
    Ambas lanzan UnsupportedOperation sin consultar el adaptador.

Modelos de Datos (Pydantic):
    Los resultados son objetos Address con todos los campos presentes;
    los datos desconocidos valen None.
"""

from .adapters import GeoIP2Adapter, GeoIP2ReaderAdapter, GeoIP2WebServiceAdapter
from .config import Settings
from .exceptions import (
    GeoIPFinderError,
    UnsupportedOperation,
    NoResult,
    ConfigurationError,
    ParsingError,
    ServiceError,
    ServiceConnectionError,
    ServiceTimeoutError,
    ServiceHTTPError,
)
from .factory import create_adapter, create_resolver
from .models import Address, AddressCollection, AdminUnit, Bounds, GeoRecord
from .provider import Provider
from .resolver import GeoIPResolver

__version__ = "1.0.0"
__all__ = [
    "GeoIPResolver",
    "Provider",
    "GeoIP2Adapter",
    "GeoIP2ReaderAdapter",
    "GeoIP2WebServiceAdapter",
    "Settings",
    "create_adapter",
    "create_resolver",
    "Address",
    "AddressCollection",
    "AdminUnit",
    "Bounds",
    "GeoRecord",
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
