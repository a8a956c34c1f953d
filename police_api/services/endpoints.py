"""Static table of every data.police.uk operation the client exposes.

Each entry pairs a path template and its query parameters with the type
its response body decodes to. The table is built once at import and never
changes; the TypeAdapter for each response type is created on first use.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from string import Formatter
from typing import Any

from pydantic import TypeAdapter

from police_api.schemas import (
    Crime,
    CrimeCategory,
    CrimeDataAvailability,
    CrimeLastUpdated,
    CrimeOutcomes,
    Force,
    ForceDetail,
    LatLng,
    LocateNeighbourhoodResult,
    Neighbourhood,
    NeighbourhoodDetail,
    NeighbourhoodEvent,
    NeighbourhoodPriority,
    Outcome,
    SearchArea,
    SeniorOfficer,
    StopAndSearch,
)
from police_api.services.area_query import build_query


@dataclass(frozen=True)
class Endpoint:
    """One GET operation: where it lives and what it returns."""

    name: str
    path_template: str
    response_type: Any
    query_params: tuple[str, ...] = ()
    takes_area: bool = False

    @property
    def path_params(self) -> tuple[str, ...]:
        """Placeholder names in the path template, in order."""
        return tuple(
            field for _, field, _, _ in Formatter().parse(self.path_template) if field
        )

    @cached_property
    def adapter(self) -> TypeAdapter:
        return TypeAdapter(self.response_type)

    def resolve(
        self,
        base_url: str,
        path_args: Mapping[str, str] | None = None,
        area: SearchArea | None = None,
        query: Mapping[str, object | None] | None = None,
    ) -> str:
        """
        Build the full request URL for this endpoint.

        Path arguments are substituted verbatim. Query values are emitted
        in the endpoint's declared order regardless of mapping order.

        Raises:
            ValueError: on missing path arguments, unknown query parameters,
                or an area passed to an endpoint that takes none
        """
        path_args = path_args or {}
        query = query or {}

        missing = [p for p in self.path_params if p not in path_args]
        if missing:
            raise ValueError(f"{self.name}: missing path arguments {missing}")
        unknown = set(query) - set(self.query_params)
        if unknown:
            raise ValueError(f"{self.name}: unknown query parameters {sorted(unknown)}")
        if area is not None and not self.takes_area:
            raise ValueError(f"{self.name}: does not accept a search area")

        path = self.path_template.format(**path_args)
        qs = build_query(area, ((name, query.get(name)) for name in self.query_params))
        return f"{base_url}{path}{qs}"


# Availability & forces
CRIME_DATA_AVAILABILITY = Endpoint(
    "crime_data_availability", "/crimes-street-dates", list[CrimeDataAvailability]
)
FORCES = Endpoint("forces", "/forces", list[Force])
FORCE = Endpoint("force", "/forces/{force_id}", ForceDetail)
SENIOR_OFFICERS = Endpoint(
    "senior_officers", "/forces/{force_id}/people", list[SeniorOfficer]
)

# Crime
CRIME_CATEGORIES = Endpoint(
    "crime_categories", "/crime-categories", list[CrimeCategory], ("date",)
)
CRIME_LAST_UPDATED = Endpoint(
    "crime_last_updated", "/crime-last-updated", CrimeLastUpdated
)
STREET_LEVEL_CRIMES = Endpoint(
    "street_level_crimes",
    "/crimes-street/{category}",
    list[Crime],
    ("date",),
    takes_area=True,
)
STREET_LEVEL_OUTCOMES = Endpoint(
    "street_level_outcomes",
    "/outcomes-at-location",
    list[Outcome],
    ("date",),
    takes_area=True,
)
CRIMES_AT_LOCATION = Endpoint(
    "crimes_at_location", "/crimes-at-location", list[Crime], ("location_id", "date")
)
CRIMES_NO_LOCATION = Endpoint(
    "crimes_no_location",
    "/crimes-no-location",
    list[Crime],
    ("category", "force", "date"),
)
OUTCOMES_FOR_CRIME = Endpoint(
    "outcomes_for_crime", "/outcomes-for-crime/{persistent_id}", CrimeOutcomes
)

# Neighbourhoods
NEIGHBOURHOODS = Endpoint(
    "neighbourhoods", "/{force_id}/neighbourhoods", list[Neighbourhood]
)
NEIGHBOURHOOD = Endpoint(
    "neighbourhood", "/{force_id}/{neighbourhood_id}", NeighbourhoodDetail
)
NEIGHBOURHOOD_BOUNDARY = Endpoint(
    "neighbourhood_boundary", "/{force_id}/{neighbourhood_id}/boundary", list[LatLng]
)
NEIGHBOURHOOD_TEAM = Endpoint(
    "neighbourhood_team", "/{force_id}/{neighbourhood_id}/people", list[SeniorOfficer]
)
NEIGHBOURHOOD_EVENTS = Endpoint(
    "neighbourhood_events",
    "/{force_id}/{neighbourhood_id}/events",
    list[NeighbourhoodEvent],
)
NEIGHBOURHOOD_PRIORITIES = Endpoint(
    "neighbourhood_priorities",
    "/{force_id}/{neighbourhood_id}/priorities",
    list[NeighbourhoodPriority],
)
LOCATE_NEIGHBOURHOOD = Endpoint(
    "locate_neighbourhood", "/locate-neighbourhood", LocateNeighbourhoodResult, ("q",)
)

# Stop and search
STOPS_STREET = Endpoint(
    "stops_street", "/stops-street", list[StopAndSearch], ("date",), takes_area=True
)
STOPS_AT_LOCATION = Endpoint(
    "stops_at_location",
    "/stops-at-location",
    list[StopAndSearch],
    ("location_id", "date"),
)
STOPS_NO_LOCATION = Endpoint(
    "stops_no_location", "/stops-no-location", list[StopAndSearch], ("force", "date")
)
STOPS_FORCE = Endpoint(
    "stops_force", "/stops-force", list[StopAndSearch], ("force", "date")
)

ENDPOINTS: dict[str, Endpoint] = {
    endpoint.name: endpoint
    for endpoint in (
        CRIME_DATA_AVAILABILITY,
        FORCES,
        FORCE,
        SENIOR_OFFICERS,
        CRIME_CATEGORIES,
        CRIME_LAST_UPDATED,
        STREET_LEVEL_CRIMES,
        STREET_LEVEL_OUTCOMES,
        CRIMES_AT_LOCATION,
        CRIMES_NO_LOCATION,
        OUTCOMES_FOR_CRIME,
        NEIGHBOURHOODS,
        NEIGHBOURHOOD,
        NEIGHBOURHOOD_BOUNDARY,
        NEIGHBOURHOOD_TEAM,
        NEIGHBOURHOOD_EVENTS,
        NEIGHBOURHOOD_PRIORITIES,
        LOCATE_NEIGHBOURHOOD,
        STOPS_STREET,
        STOPS_AT_LOCATION,
        STOPS_NO_LOCATION,
        STOPS_FORCE,
    )
}
