"""
Línea de comandos de GeoIPFinder.

Uso:
    geoipfinder 74.200.247.59
    geoipfinder 74.200.247.59 --locale de --json

    # O como módulo
    python -m geoipfinder 8.8.8.8
"""

import argparse
import json
import sys
import uuid

from . import factory
from .config import Settings
from .exceptions import GeoIPFinderError
from .utils.logging import set_request_id, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geoipfinder",
        description="Geolocaliza una dirección IP con datos GeoIP2",
    )
    parser.add_argument("ip", help="Dirección IPv4 o IPv6")
    parser.add_argument(
        "--locale",
        help="Idioma de los nombres (sobrescribe GEOIPFINDER_LOCALE)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Imprime el resultado como JSON",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Nivel de logging (sobrescribe GEOIPFINDER_LOG_LEVEL)",
    )
    return parser


def format_address(address) -> str:
    """Texto legible de una dirección: localidad, región, país y coordenadas."""
    parts = [p for p in (address.locality, str(address.region), str(address.country)) if p]
    text = ", ".join(parts) or "(desconocido)"
    if address.country.code:
        text += f" [{address.country.code}]"
    if address.latitude is not None and address.longitude is not None:
        text += f" ({address.latitude}, {address.longitude})"
    return text


def main(argv=None) -> int:
    """Punto de entrada; devuelve el código de salida."""
    args = build_parser().parse_args(argv)
    settings = Settings()

    logger = setup_logging(args.log_level or settings.log_level, json_format=settings.log_json)
    set_request_id(uuid.uuid4().hex[:12])

    try:
        with factory.create_resolver(settings, logger=logger) as resolver:
            addresses = resolver.resolve_forward(args.ip, args.locale)
    except GeoIPFinderError as e:
        logger.debug("Error resolviendo %s", args.ip, exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    for address in addresses:
        if args.json:
            print(json.dumps(address.to_dict(), ensure_ascii=False))
        else:
            print(format_address(address))
    return 0


if __name__ == "__main__":
    sys.exit(main())
