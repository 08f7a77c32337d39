"""
GeoIPResolver - Geolocalización de direcciones IP
=================================================

Resolvedor directo sobre un adaptador GeoIP2: valida la consulta, pide el
registro crudo al adaptador y lo convierte en una Address normalizada.
"""

import ipaddress
import logging
import time

from .adapters.base import GeoIP2Adapter
from .exceptions import GeoIPFinderError, UnsupportedOperation
from .models import Address, AddressCollection, AdminUnit, GeoRecord
from .provider import Provider

LOCALHOST = "127.0.0.1"


class GeoIPResolver(Provider):
    """Resuelve direcciones IP a direcciones jerárquicas con datos GeoIP2.

    Solo soporta geocodificación directa de IPs. Las direcciones postales y la
    geocodificación inversa se rechazan con UnsupportedOperation sin llegar a
    consultar el adaptador.

    Example:
        adapter = GeoIP2ReaderAdapter.from_database("GeoLite2-City.mmdb")
        resolver = GeoIPResolver(adapter)

        address = resolver.resolve_forward("74.200.247.59", "de")[0]
        print(address.locality, address.country.code)

    Attributes:
        adapter: Adaptador inyectado que entrega los registros crudos
        locale: Idioma por defecto para los nombres
    """

    name = "geoip2"
    supports_forward = True
    supports_reverse = False

    def __init__(self, adapter: GeoIP2Adapter, locale: str = "en", logger=None):
        """Inicializa el resolvedor.

        Args:
            adapter: Adaptador GeoIP2 (base de datos, servicio web o doble de test)
            locale: Idioma por defecto cuando la consulta no indica uno
            logger: Logger opcional para debug
        """
        self.adapter = adapter
        self.locale = locale

        if logger:
            self.log = logger
        else:
            self.log = logging.getLogger("geoipfinder")
            if not self.log.handlers:
                self.log.addHandler(logging.NullHandler())

    def close(self):
        """Cierra el adaptador subyacente."""
        self.adapter.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # =========================================================================
    # API Principal
    # =========================================================================

    def resolve_forward(self, query: str, locale: str | None = None) -> list[Address]:
        """Geolocaliza una dirección IP.

        Args:
            query: Dirección IPv4 o IPv6
            locale: Idioma de los nombres (usa el del resolvedor si es None)

        Returns:
            list[Address]: Lista con una única dirección

        Raises:
            UnsupportedOperation: Si la consulta no es una dirección IP
            NoResult: Si el adaptador no tiene datos para la IP
            ServiceError: Si el adaptador falla
        """
        ip = self._parse_ip(query)
        locale = locale if locale is not None else self.locale

        if ip == LOCALHOST:
            self.log.debug("Localhost query, skipping adapter")
            return [self._localhost_address()]

        start_time = time.time()
        try:
            self.adapter.set_locale(locale)
            record = GeoRecord.from_raw(self.adapter.get_content(ip))
        except GeoIPFinderError as e:
            self.log.warning("[LOOKUP_FAILED] %s: %s", ip, e)
            raise
        elapsed = (time.time() - start_time) * 1000

        self.log.info(
            "[LOOKUP] %s | locale: %s | empty: %s | Time: %.2fms",
            ip, locale, record.is_empty(), elapsed
        )

        return [self._map_record(record, locale)]

    def resolve_forward_response(self, query: str, locale: str | None = None) -> AddressCollection:
        """Geolocaliza una IP y devuelve un objeto AddressCollection completo."""
        start_time = time.time()
        addresses = self.resolve_forward(query, locale)
        elapsed_ms = (time.time() - start_time) * 1000
        return AddressCollection(
            query=query,
            locale=locale if locale is not None else self.locale,
            addresses=addresses,
            count=len(addresses),
            time_ms=elapsed_ms,
        )

    def resolve_reverse(self, latitude: float, longitude: float) -> list[Address]:
        """La geocodificación inversa no está soportada: los datos se indexan por IP."""
        raise UnsupportedOperation("The GeoIP2 provider is not able to do reverse geocoding.")

    # =========================================================================
    # Validación
    # =========================================================================

    def _parse_ip(self, query) -> str:
        """Valida que la consulta sea una IP y la devuelve normalizada."""
        if isinstance(query, str):
            try:
                return str(ipaddress.ip_address(query.strip()))
            except ValueError:
                pass

        self.log.debug("Rejected non-IP query: %r", query)
        raise UnsupportedOperation(
            "The GeoIP2 provider does not support street addresses, only IP addresses."
        )

    # =========================================================================
    # Conversión de registros
    # =========================================================================

    def _map_record(self, record: GeoRecord, locale: str) -> Address:
        """Convierte un GeoRecord en una Address; lo que falta queda a None."""
        location = record.location
        region = record.region
        country = record.country

        return Address(
            latitude=location.latitude if location else None,
            longitude=location.longitude if location else None,
            locality=record.city.name_for(locale) if record.city else None,
            region=AdminUnit(
                name=region.name_for(locale),
                code=region.iso_code,
            ) if region else AdminUnit(),
            # registered_country se ignora: solo cuenta el país de ubicación
            country=AdminUnit(
                name=country.name_for(locale),
                code=country.iso_code,
            ) if country else AdminUnit(),
            provided_by=self.name,
        )

    def _localhost_address(self) -> Address:
        return Address(
            locality="localhost",
            county=AdminUnit(name="localhost"),
            region=AdminUnit(name="localhost"),
            country=AdminUnit(name="localhost"),
            provided_by=self.name,
        )
