"""Query-string encoding for search areas and optional filters.

Values are written verbatim: nothing is URL-encoded here, callers supply
already-safe identifiers and httpx applies its default quoting.
"""

from collections.abc import Iterable
from decimal import Decimal

from police_api.schemas.area import LocationId, Point, Polygon, SearchArea


def format_number(value: float) -> str:
    """Shortest-repr digits in positional notation, never exponent form."""
    return f"{Decimal(repr(value)):f}"


def format_coordinate(lat: float, lng: float) -> str:
    """Render a pair as ``lat,lng``, e.g. ``51.47793,-0.00005``."""
    return f"{format_number(lat)},{format_number(lng)}"


def encode_area(area: SearchArea) -> str:
    """
    Encode a search area as a query fragment.

    - Point      -> ``lat=52.629729&lng=-1.131592``
    - Polygon    -> ``poly=52.268,0.543:52.794,0.238:52.13,0.478``
    - LocationId -> ``location_id=1737432``

    Vertex order is preserved and an empty polygon encodes as ``poly=``.
    """
    if isinstance(area, Point):
        return f"lat={format_number(area.lat)}&lng={format_number(area.lng)}"
    if isinstance(area, Polygon):
        poly = ":".join(format_coordinate(c.lat, c.lng) for c in area.coords)
        return f"poly={poly}"
    if isinstance(area, LocationId):
        return f"location_id={area.id}"
    raise TypeError(f"Not a search area: {area!r}")


def build_query(
    area: SearchArea | None = None,
    params: Iterable[tuple[str, object | None]] = (),
) -> str:
    """
    Assemble a query string, including the leading ``?``.

    The area fragment comes first, then *params* in the given order.
    Params whose value is None are dropped. Returns "" when nothing remains.
    """
    parts: list[str] = []
    if area is not None:
        parts.append(encode_area(area))
    for name, value in params:
        if value is None:
            continue
        parts.append(f"{name}={value}")

    if not parts:
        return ""
    return "?" + "&".join(parts)
