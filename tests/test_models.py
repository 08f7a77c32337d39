import pytest
import sys
from pathlib import Path

# Añadir el directorio raíz al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from geoipfinder.models import Address, AddressCollection, AdminUnit, Bounds


def test_address_always_fully_shaped():
    """Una Address vacía tiene todas las claves, con valores None."""
    address = Address()
    data = address.to_dict()

    assert list(data) == [
        "latitude", "longitude", "bounds", "streetNumber", "streetName",
        "locality", "subLocality", "postalCode", "county", "countyCode",
        "region", "regionCode", "country", "countryCode", "timezone", "providedBy",
    ]
    assert data["bounds"] == {"south": None, "west": None, "north": None, "east": None}
    assert all(v is None for k, v in data.items() if k != "bounds")


def test_address_to_dict_values():
    address = Address(
        latitude=53.55,
        longitude=10.0,
        locality="Hamburg",
        region=AdminUnit(name="Hamburg", code="HH"),
        country=AdminUnit(name="Germany", code="DE"),
        provided_by="geoip2",
    )
    data = address.to_dict()

    assert data["locality"] == "Hamburg"
    assert data["regionCode"] == "HH"
    assert data["country"] == "Germany"
    assert data["countryCode"] == "DE"
    assert data["county"] is None
    assert data["providedBy"] == "geoip2"


def test_bounds_defined_only_when_complete():
    assert Bounds().is_defined() is False
    assert Bounds(south=1.0, west=2.0, north=None, east=4.0).is_defined() is False
    assert Bounds(south=1.0, west=2.0, north=3.0, east=4.0).is_defined() is True


def test_admin_unit_str():
    assert str(AdminUnit(name="Catalunya", code="CT")) == "Catalunya"
    assert str(AdminUnit(code="CT")) == ""


def test_admin_units_are_independent():
    """Cada Address tiene sus propias unidades por defecto."""
    a, b = Address(), Address()
    assert a.county == b.county
    assert a.county is not b.county


def test_collection_iteration():
    addresses = [Address(locality="Girona")]
    collection = AddressCollection(query="8.8.8.8", locale="ca", addresses=addresses, count=1)

    assert [a.locality for a in collection] == ["Girona"]
    assert collection.first().locality == "Girona"
    assert len(collection) == 1

    empty = AddressCollection(query="8.8.8.8", locale="ca", addresses=[], count=0)
    assert empty.first() is None
