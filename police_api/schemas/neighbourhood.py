"""Pydantic schemas for neighbourhoods and neighbourhood policing teams."""

from pydantic import Field

from police_api.schemas.fields import APIModel
from police_api.schemas.force import ContactDetails


class Neighbourhood(APIModel):
    """Neighbourhood summary. ``id`` is only unique within its force."""

    id: str
    name: str


class LatLng(APIModel):
    """Latitude/longitude as the API's decimal strings."""

    latitude: str
    longitude: str


class Link(APIModel):
    url: str | None = None
    title: str | None = None
    description: str | None = None


class NeighbourhoodLocation(APIModel):
    """A place associated with a neighbourhood, e.g. a police station."""

    name: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    postcode: str | None = None
    address: str | None = None
    telephone: str | None = None
    kind: str | None = Field(default=None, alias="type")
    description: str | None = None


class NeighbourhoodDetail(APIModel):
    """Detailed information about a neighbourhood."""

    id: str
    name: str
    description: str | None = None
    population: str | None = None
    url_force: str | None = None
    contact_details: ContactDetails
    centre: LatLng
    links: tuple[Link, ...]
    locations: tuple[NeighbourhoodLocation, ...]


class NeighbourhoodEvent(APIModel):
    """A community event. The API often returns these partially filled in."""

    title: str | None = None
    description: str | None = None
    address: str | None = None
    kind: str | None = Field(default=None, alias="type")
    start_date: str | None = None
    end_date: str | None = None
    contact_details: ContactDetails | None = None


class NeighbourhoodPriority(APIModel):
    issue: str | None = None
    issue_date: str | None = Field(default=None, alias="issue-date")
    action: str | None = None
    action_date: str | None = Field(default=None, alias="action-date")


class LocateNeighbourhoodResult(APIModel):
    """Force and neighbourhood ids responsible for a point."""

    force: str
    neighbourhood: str
