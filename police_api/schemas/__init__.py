"""Pydantic schemas for data.police.uk responses and query inputs."""

from police_api.schemas.area import Coordinate, LocationId, Point, Polygon, SearchArea
from police_api.schemas.categories import OutcomeCategory, decode_category
from police_api.schemas.crime import (
    Crime,
    CrimeCategory,
    CrimeDataAvailability,
    CrimeLastUpdated,
    CrimeOutcome,
    CrimeOutcomes,
    Location,
    Outcome,
    OutcomeDetail,
    OutcomeStatus,
    Street,
)
from police_api.schemas.force import (
    ContactDetails,
    EngagementMethod,
    Force,
    ForceDetail,
    SeniorOfficer,
)
from police_api.schemas.neighbourhood import (
    LatLng,
    Link,
    LocateNeighbourhoodResult,
    Neighbourhood,
    NeighbourhoodDetail,
    NeighbourhoodEvent,
    NeighbourhoodLocation,
    NeighbourhoodPriority,
)
from police_api.schemas.stop_and_search import OutcomeObject, StopAndSearch, StopAndSearchType

__all__ = [
    "Coordinate",
    "LocationId",
    "Point",
    "Polygon",
    "SearchArea",
    "OutcomeCategory",
    "decode_category",
    "Crime",
    "CrimeCategory",
    "CrimeDataAvailability",
    "CrimeLastUpdated",
    "CrimeOutcome",
    "CrimeOutcomes",
    "Location",
    "Outcome",
    "OutcomeDetail",
    "OutcomeStatus",
    "Street",
    "ContactDetails",
    "EngagementMethod",
    "Force",
    "ForceDetail",
    "SeniorOfficer",
    "LatLng",
    "Link",
    "LocateNeighbourhoodResult",
    "Neighbourhood",
    "NeighbourhoodDetail",
    "NeighbourhoodEvent",
    "NeighbourhoodLocation",
    "NeighbourhoodPriority",
    "OutcomeObject",
    "StopAndSearch",
    "StopAndSearchType",
]
