from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Bounds(BaseModel):
    """Rectángulo envolvente. Una búsqueda por IP es puntual y nunca lo define."""
    south: float | None = None
    west: float | None = None
    north: float | None = None
    east: float | None = None

    def is_defined(self) -> bool:
        return all(v is not None for v in (self.south, self.west, self.north, self.east))

    def to_dict(self) -> dict[str, float | None]:
        return self.model_dump()


class AdminUnit(BaseModel):
    """Unidad administrativa (país, región o condado) con nombre y código."""
    model_config = ConfigDict(frozen=True)

    name: str | None = Field(None, description="Nombre en el idioma pedido")
    code: str | None = Field(None, description="Código ISO")

    def __str__(self) -> str:
        return self.name or ""


class Address(BaseModel):
    """Dirección normalizada y jerárquica (país -> región -> condado -> localidad).

    Todos los campos existen siempre; solo sus valores pueden ser None.
    """
    latitude: float | None = None
    longitude: float | None = None
    bounds: Bounds = Field(default_factory=Bounds)
    street_number: str | None = None
    street_name: str | None = None
    sub_locality: str | None = None
    locality: str | None = None
    postal_code: str | None = None
    county: AdminUnit = Field(default_factory=AdminUnit)
    region: AdminUnit = Field(default_factory=AdminUnit)
    country: AdminUnit = Field(default_factory=AdminUnit)
    timezone: str | None = None
    provided_by: str | None = Field(None, description="Proveedor que construyó la dirección")

    def to_dict(self) -> dict[str, Any]:
        """Representación plana de la dirección."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "bounds": self.bounds.to_dict(),
            "streetNumber": self.street_number,
            "streetName": self.street_name,
            "locality": self.locality,
            "subLocality": self.sub_locality,
            "postalCode": self.postal_code,
            "county": self.county.name,
            "countyCode": self.county.code,
            "region": self.region.name,
            "regionCode": self.region.code,
            "country": self.country.name,
            "countryCode": self.country.code,
            "timezone": self.timezone,
            "providedBy": self.provided_by,
        }


class AddressCollection(BaseModel):
    """Respuesta completa de una resolución directa."""
    query: str
    locale: str
    addresses: list[Address]
    count: int
    time_ms: Optional[float] = None

    def first(self) -> Address | None:
        return self.addresses[0] if self.addresses else None

    def __iter__(self):
        """Permite iterar sobre las direcciones directamente: for a in collection: ..."""
        return iter(self.addresses)

    def __len__(self) -> int:
        return self.count
