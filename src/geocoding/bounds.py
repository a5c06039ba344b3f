from src.reference.rwanda import RWANDA_BOUNDS


def parse_bbox(bbox):
    """
    Parse a "min_lon, min_lat, max_lon, max_lat" string into floats.

    Raises ValueError if the string does not hold four numbers or the box is empty.
    """
    parts = [p.strip() for p in bbox.split(",")]
    if len(parts) != 4:
        raise ValueError(f"Bounding box must have 4 values, got {len(parts)}: '{bbox}'")
    min_lon, min_lat, max_lon, max_lat = (float(p) for p in parts)
    if min_lon > max_lon or min_lat > max_lat:
        raise ValueError(f"Bounding box minimum exceeds maximum: '{bbox}'")
    return min_lon, min_lat, max_lon, max_lat


def is_in_country(latitude, longitude, bbox=RWANDA_BOUNDS):
    # Edges count as inside
    min_lon, min_lat, max_lon, max_lat = parse_bbox(bbox)
    return min_lat <= latitude <= max_lat and min_lon <= longitude <= max_lon
