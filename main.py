"""
Main entrypoint for the Rwanda reverse geocoder.

Usage:
    python main.py -1.9441 30.0619          # reverse geocode a coordinate
    python main.py --search "Kimironko"     # forward geocode an address

The HTTP API lives in src.api.app and can be served with any ASGI server.
"""
import argparse
import json
import logging
import sys

from src.geocoding.errors import GeocodingError
from src.geocoding.service import resolve, resolve_address

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Resolve Rwandan coordinates into administrative addresses")
    parser.add_argument("latitude", nargs="?", type=float)
    parser.add_argument("longitude", nargs="?", type=float)
    parser.add_argument("--search", help="Forward geocode this address instead")
    parser.add_argument("--parallel", action="store_true", help="Query all zoom levels concurrently")
    args = parser.parse_args(argv)

    if args.search is None and (args.latitude is None or args.longitude is None):
        parser.error("latitude and longitude are required unless --search is given")
    if args.latitude is not None and not -90 <= args.latitude <= 90:
        parser.error("latitude must be between -90 and 90")
    if args.longitude is not None and not -180 <= args.longitude <= 180:
        parser.error("longitude must be between -180 and 180")
    return args


def main(argv=None):
    """
    Main function to run a single lookup.
    """
    args = parse_args(argv)
    try:
        if args.search is not None:
            candidates = resolve_address(args.search)
            print(json.dumps([c.to_dict() for c in candidates], indent=2, ensure_ascii=False))
        else:
            result = resolve(args.latitude, args.longitude, parallel=args.parallel)
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
            if result.is_partial:
                print("Warning: low-confidence result, verify before use", file=sys.stderr)
        return 0
    except GeocodingError as e:
        print(f"Geocoding failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
