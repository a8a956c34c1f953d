"""Async client for the data.police.uk API."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import httpx
from pydantic import ValidationError

from police_api.config import get_settings
from police_api.exceptions import APIError, DecodeError, TransportError
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
from police_api.services import endpoints
from police_api.services.area_query import format_coordinate
from police_api.services.endpoints import Endpoint

logger = logging.getLogger(__name__)
settings = get_settings()


def _read_text(response: httpx.Response) -> str:
    """Best-effort response text for error reporting."""
    try:
        return response.text
    except (httpx.ResponseNotRead, UnicodeDecodeError, LookupError):
        return ""


class PoliceClient:
    """
    Client for the UK Police open data API (data.police.uk).

    Features:
    - One GET per operation, decoded into frozen pydantic models
    - Three disjoint failure kinds: TransportError, APIError, DecodeError
    - No retries, caching or pagination; layer those on top if needed

    The client holds no mutable state and can be shared between
    concurrently running tasks. Pass ``http_client`` to reuse a pooled
    ``httpx.AsyncClient`` (its lifetime stays with the caller); otherwise
    each call opens and closes its own.
    """

    def __init__(
        self,
        base_url: str = settings.police_api_base_url,
        timeout: float = settings.police_api_timeout,
        user_agent: str = settings.police_api_user_agent,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http_client = http_client

        # Fixed at construction; shared by every concurrent call
        self.headers: Mapping[str, str] = MappingProxyType(
            {
                "Accept": "application/json",
                "User-Agent": user_agent,
            }
        )

    async def _send_get(self, url: str) -> httpx.Response:
        """Issue one GET, mapping network-level failures to TransportError."""
        try:
            if self.http_client is not None:
                return await self.http_client.get(url, headers=self.headers)
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.get(url, headers=self.headers)
        except httpx.RequestError as e:
            logger.warning(f"Request error for {url}: {e!r}")
            raise TransportError(url, str(e) or type(e).__name__) from e

    async def _call(
        self,
        endpoint: Endpoint,
        path_args: Mapping[str, str] | None = None,
        area: SearchArea | None = None,
        **query: Any,
    ) -> Any:
        """Resolve *endpoint* to a URL, fetch it and decode the body."""
        url = endpoint.resolve(self.base_url, path_args, area=area, query=query)
        logger.debug(f"GET {url}")
        response = await self._send_get(url)

        if not response.is_success:
            logger.warning(f"{endpoint.name} returned HTTP {response.status_code}")
            raise APIError(response.status_code, _read_text(response))

        try:
            result = endpoint.adapter.validate_json(response.content)
        except ValidationError as e:
            errors = e.errors(include_url=False)
            first = errors[0] if errors else {}
            loc = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
            detail = f"{e.error_count()} error(s), first at {loc}: {first.get('msg', '')}"
            logger.warning(f"Decode failure for {endpoint.name}: {detail}")
            raise DecodeError(endpoint.name, detail, errors) from e

        if isinstance(result, list):
            logger.info(f"Fetched {len(result)} {endpoint.name} records")
        return result

    # ── Availability & forces ─────────────────────────────────────

    async def crime_data_availability(self) -> list[CrimeDataAvailability]:
        """Months with street-level data, and the forces with stop and search data for each."""
        return await self._call(endpoints.CRIME_DATA_AVAILABILITY)

    async def forces(self) -> list[Force]:
        """List all forces."""
        return await self._call(endpoints.FORCES)

    async def force(self, force_id: str) -> ForceDetail:
        """Fetch details of a single force, e.g. ``"leicestershire"``."""
        return await self._call(endpoints.FORCE, {"force_id": force_id})

    async def senior_officers(self, force_id: str) -> list[SeniorOfficer]:
        """Fetch the senior officers of a force."""
        return await self._call(endpoints.SENIOR_OFFICERS, {"force_id": force_id})

    # ── Crime ─────────────────────────────────────────────────────

    async def crime_categories(self, date: str | None = None) -> list[CrimeCategory]:
        """
        List the valid crime categories.

        Args:
            date: Month (YYYY-MM) the categories should be valid for; latest if None
        """
        return await self._call(endpoints.CRIME_CATEGORIES, date=date)

    async def crime_last_updated(self) -> CrimeLastUpdated:
        """Month of the most recent crime data."""
        return await self._call(endpoints.CRIME_LAST_UPDATED)

    async def street_level_crimes(
        self,
        category: str,
        area: SearchArea,
        date: str | None = None,
    ) -> list[Crime]:
        """
        Fetch street-level crimes within an area.

        Args:
            category: Crime category slug, or ``"all-crime"``
            area: Point or Polygon (a LocationId is rejected by the API)
            date: Month in YYYY-MM format; latest month if None

        Returns:
            Crimes in the area for the month
        """
        return await self._call(
            endpoints.STREET_LEVEL_CRIMES, {"category": category}, area=area, date=date
        )

    async def street_level_outcomes(
        self,
        area: SearchArea,
        date: str | None = None,
    ) -> list[Outcome]:
        """
        Fetch outcomes for crimes within an area.

        Args:
            area: Point, Polygon or LocationId
            date: Month in YYYY-MM format; latest month if None
        """
        return await self._call(endpoints.STREET_LEVEL_OUTCOMES, area=area, date=date)

    async def crimes_at_location(
        self,
        location_id: int,
        date: str | None = None,
    ) -> list[Crime]:
        """Fetch crimes snapped to a street-level location id."""
        return await self._call(
            endpoints.CRIMES_AT_LOCATION, location_id=location_id, date=date
        )

    async def crimes_no_location(
        self,
        category: str,
        force: str,
        date: str | None = None,
    ) -> list[Crime]:
        """
        Fetch crimes a force could not map to a location.

        Args:
            category: Crime category slug, or ``"all-crime"``
            force: Force id
            date: Month in YYYY-MM format; latest month if None
        """
        return await self._call(
            endpoints.CRIMES_NO_LOCATION, category=category, force=force, date=date
        )

    async def outcomes_for_crime(self, persistent_id: str) -> CrimeOutcomes:
        """Fetch a crime and its complete outcome history."""
        return await self._call(
            endpoints.OUTCOMES_FOR_CRIME, {"persistent_id": persistent_id}
        )

    # ── Neighbourhoods ────────────────────────────────────────────

    async def neighbourhoods(self, force_id: str) -> list[Neighbourhood]:
        return await self._call(endpoints.NEIGHBOURHOODS, {"force_id": force_id})

    async def neighbourhood(
        self, force_id: str, neighbourhood_id: str
    ) -> NeighbourhoodDetail:
        return await self._call(
            endpoints.NEIGHBOURHOOD,
            {"force_id": force_id, "neighbourhood_id": neighbourhood_id},
        )

    async def neighbourhood_boundary(
        self, force_id: str, neighbourhood_id: str
    ) -> list[LatLng]:
        """Vertices of the neighbourhood boundary polygon."""
        return await self._call(
            endpoints.NEIGHBOURHOOD_BOUNDARY,
            {"force_id": force_id, "neighbourhood_id": neighbourhood_id},
        )

    async def neighbourhood_team(
        self, force_id: str, neighbourhood_id: str
    ) -> list[SeniorOfficer]:
        return await self._call(
            endpoints.NEIGHBOURHOOD_TEAM,
            {"force_id": force_id, "neighbourhood_id": neighbourhood_id},
        )

    async def neighbourhood_events(
        self, force_id: str, neighbourhood_id: str
    ) -> list[NeighbourhoodEvent]:
        return await self._call(
            endpoints.NEIGHBOURHOOD_EVENTS,
            {"force_id": force_id, "neighbourhood_id": neighbourhood_id},
        )

    async def neighbourhood_priorities(
        self, force_id: str, neighbourhood_id: str
    ) -> list[NeighbourhoodPriority]:
        return await self._call(
            endpoints.NEIGHBOURHOOD_PRIORITIES,
            {"force_id": force_id, "neighbourhood_id": neighbourhood_id},
        )

    async def locate_neighbourhood(
        self, lat: float, lng: float
    ) -> LocateNeighbourhoodResult:
        """Find the force and neighbourhood responsible for a point."""
        return await self._call(
            endpoints.LOCATE_NEIGHBOURHOOD, q=format_coordinate(lat, lng)
        )

    # ── Stop and search ───────────────────────────────────────────

    async def stops_street(
        self,
        area: SearchArea,
        date: str | None = None,
    ) -> list[StopAndSearch]:
        """Fetch stop and searches within an area (Point or Polygon)."""
        return await self._call(endpoints.STOPS_STREET, area=area, date=date)

    async def stops_at_location(
        self,
        location_id: int,
        date: str | None = None,
    ) -> list[StopAndSearch]:
        """Fetch stop and searches snapped to a street-level location id."""
        return await self._call(
            endpoints.STOPS_AT_LOCATION, location_id=location_id, date=date
        )

    async def stops_no_location(
        self,
        force: str,
        date: str | None = None,
    ) -> list[StopAndSearch]:
        """Fetch a force's stop and searches that have no location."""
        return await self._call(endpoints.STOPS_NO_LOCATION, force=force, date=date)

    async def stops_force(
        self,
        force: str,
        date: str | None = None,
    ) -> list[StopAndSearch]:
        """Fetch all stop and searches reported by a force."""
        return await self._call(endpoints.STOPS_FORCE, force=force, date=date)
