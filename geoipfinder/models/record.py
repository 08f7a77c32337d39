import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ParsingError


class _Section(BaseModel):
    """Base de las secciones de un registro GeoIP2: todo opcional, claves extra ignoradas."""
    model_config = ConfigDict(extra="ignore", frozen=True)


class NamedSection(_Section):
    """Sección con nombres traducidos (city)."""
    geoname_id: int | None = None
    names: dict[str, str] = Field(default_factory=dict, description="Nombre por idioma")

    @field_validator("names", mode="before")
    @classmethod
    def validate_names(cls, v: Any) -> dict:
        if v is None:
            return {}
        return v

    def name_for(self, locale: str | None) -> str | None:
        """Nombre en el idioma pedido, sin recurrir a otros idiomas."""
        if locale is None:
            return None
        return self.names.get(locale)


class CountrySection(NamedSection):
    """Sección de país o de subdivisión (country, registered_country, subdivisions)."""
    iso_code: str | None = None


class ContinentSection(NamedSection):
    code: str | None = None


class LocationSection(_Section):
    latitude: float | None = None
    longitude: float | None = None
    time_zone: str | None = None
    accuracy_radius: int | None = None


class PostalSection(_Section):
    code: str | None = None


class TraitsSection(_Section):
    ip_address: str | None = None


class GeoRecord(_Section):
    """Registro crudo de geolocalización para una IP, tal como lo entrega el adaptador.

    Cualquier sección puede faltar; la ausencia significa "desconocido" y nunca
    es un error.
    """
    city: NamedSection | None = None
    continent: ContinentSection | None = None
    country: CountrySection | None = None
    registered_country: CountrySection | None = None
    subdivisions: list[CountrySection] = Field(default_factory=list)
    location: LocationSection | None = None
    postal: PostalSection | None = None
    traits: TraitsSection | None = None

    @field_validator("subdivisions", mode="before")
    @classmethod
    def validate_subdivisions(cls, v: Any) -> list:
        if v is None:
            return []
        return v

    @property
    def region(self) -> CountrySection | None:
        """Primera subdivisión (la única que se modela como región)."""
        return self.subdivisions[0] if self.subdivisions else None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_defaults=True)

    @classmethod
    def from_raw(cls, raw: Any) -> "GeoRecord":
        """Crea un GeoRecord a partir de la salida cruda de un adaptador.

        Acepta un dict, un texto o bytes JSON, None o un GeoRecord ya construido.
        La entrada vacía produce un registro vacío.

        Raises:
            ParsingError: Si el JSON está mal formado o el tipo no es reconocido
        """
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return cls()

        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        if isinstance(raw, str):
            if not raw.strip():
                return cls()
            try:
                raw = json.loads(raw)
            except ValueError as e:
                raise ParsingError(
                    "El contenido del adaptador no es JSON válido",
                    details={"error": str(e), "value": raw[:100]}
                ) from e
            if raw is None:
                return cls()

        if not isinstance(raw, dict):
            raise ParsingError(
                "El contenido del adaptador debe ser un objeto",
                details={"received_type": type(raw).__name__}
            )

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ParsingError(
                "Registro GeoIP2 con formato inesperado",
                details={"errors": e.error_count()}
            ) from e
