"""
Modelos de datos para GeoIPFinder.
"""

from .address import Address, AddressCollection, AdminUnit, Bounds
from .record import GeoRecord

__all__ = ["Address", "AddressCollection", "AdminUnit", "Bounds", "GeoRecord"]
