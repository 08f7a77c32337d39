"""
Adaptadores de datos GeoIP2 consumidos por el resolvedor.
"""

from .base import GeoIP2Adapter
from .reader import GeoIP2ReaderAdapter
from .webservice import GeoIP2WebServiceAdapter

__all__ = ["GeoIP2Adapter", "GeoIP2ReaderAdapter", "GeoIP2WebServiceAdapter"]
