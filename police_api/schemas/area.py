"""Search areas accepted by the area-scoped queries."""

from pydantic import BaseModel, ConfigDict

from police_api.schemas.fields import UInt64


class Coordinate(BaseModel):
    """A WGS84 latitude/longitude pair. Ranges are not checked."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Point(BaseModel):
    """Everything within a one mile radius of a point (radius fixed by the API)."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Polygon(BaseModel):
    """A custom area given by its vertices, in order.

    Closure and minimum vertex count are left to the server.
    """

    model_config = ConfigDict(frozen=True)

    coords: tuple[Coordinate, ...]


class LocationId(BaseModel):
    """A street-level location id taken from a previous ``Street`` result."""

    model_config = ConfigDict(frozen=True)

    id: UInt64


SearchArea = Point | Polygon | LocationId
