"""police_api: typed async access to the UK Police open data API."""

__version__ = "0.1.0"

from police_api.exceptions import (  # noqa: E402
    APIError,
    DecodeError,
    PoliceAPIError,
    TransportError,
    UnknownCategory,
)
from police_api.schemas import (  # noqa: E402
    ContactDetails,
    Coordinate,
    Crime,
    CrimeCategory,
    CrimeDataAvailability,
    CrimeLastUpdated,
    CrimeOutcome,
    CrimeOutcomes,
    EngagementMethod,
    Force,
    ForceDetail,
    LatLng,
    Link,
    LocateNeighbourhoodResult,
    Location,
    LocationId,
    Neighbourhood,
    NeighbourhoodDetail,
    NeighbourhoodEvent,
    NeighbourhoodLocation,
    NeighbourhoodPriority,
    Outcome,
    OutcomeCategory,
    OutcomeDetail,
    OutcomeObject,
    OutcomeStatus,
    Point,
    Polygon,
    SearchArea,
    SeniorOfficer,
    StopAndSearch,
    StopAndSearchType,
    Street,
)
from police_api.services import PoliceClient  # noqa: E402

__all__ = [
    "__version__",
    "PoliceClient",
    # errors
    "PoliceAPIError",
    "TransportError",
    "APIError",
    "DecodeError",
    "UnknownCategory",
    # search areas
    "Coordinate",
    "Point",
    "Polygon",
    "LocationId",
    "SearchArea",
    # entities
    "ContactDetails",
    "Crime",
    "CrimeCategory",
    "CrimeDataAvailability",
    "CrimeLastUpdated",
    "CrimeOutcome",
    "CrimeOutcomes",
    "EngagementMethod",
    "Force",
    "ForceDetail",
    "LatLng",
    "Link",
    "LocateNeighbourhoodResult",
    "Location",
    "Neighbourhood",
    "NeighbourhoodDetail",
    "NeighbourhoodEvent",
    "NeighbourhoodLocation",
    "NeighbourhoodPriority",
    "Outcome",
    "OutcomeCategory",
    "OutcomeDetail",
    "OutcomeObject",
    "OutcomeStatus",
    "SeniorOfficer",
    "StopAndSearch",
    "StopAndSearchType",
    "Street",
]
