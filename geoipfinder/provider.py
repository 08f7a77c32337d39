"""
Interfaz común de los proveedores de geocodificación.

Cada proveedor declara qué operaciones soporta; las que no soporta lanzan
UnsupportedOperation para que el llamante pueda tratar a todos los
proveedores de forma uniforme.
"""

from abc import ABC, abstractmethod

from .models import Address


class Provider(ABC):
    """Proveedor de geocodificación directa y/o inversa.

    Attributes:
        name: Nombre corto del proveedor
        supports_forward: Si resuelve consultas directas
        supports_reverse: Si resuelve coordenadas a direcciones
    """

    name: str = ""
    supports_forward: bool = True
    supports_reverse: bool = True

    def get_name(self) -> str:
        return self.name

    @abstractmethod
    def resolve_forward(self, query: str, locale: str | None = None) -> list[Address]:
        """Geocodificación directa: consulta -> direcciones."""
        raise NotImplementedError

    @abstractmethod
    def resolve_reverse(self, latitude: float, longitude: float) -> list[Address]:
        """Geocodificación inversa: coordenadas -> direcciones."""
        raise NotImplementedError
