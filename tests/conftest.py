"""Pytest fixtures for police_api tests."""

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from police_api.services.police_client import PoliceClient

BASE_URL = "https://data.police.uk/api"
PERSISTENT_ID = "dd6e56f90d1bdd7bc7482af17852369f263203d9a688fac42ec53bf48485d8f1"


class FakePoliceAPI:
    """
    In-memory stand-in for data.police.uk, served through httpx.MockTransport.

    Routes are keyed by path relative to the API root. Unrouted paths answer
    404 "Not Found", like the real service does for unknown forces.
    """

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, bytes]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        path: str,
        payload: Any = None,
        status: int = 200,
        content: bytes | None = None,
    ) -> None:
        body = content if content is not None else json.dumps(payload).encode()
        self.routes[f"/api{path}"] = (status, body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, b"Not Found"))
        return httpx.Response(status, content=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_api() -> FakePoliceAPI:
    return FakePoliceAPI()


@pytest_asyncio.fixture
async def client(fake_api: FakePoliceAPI) -> AsyncGenerator[PoliceClient, None]:
    """PoliceClient wired to the fake API through a shared AsyncClient."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api)) as http:
        yield PoliceClient(base_url=BASE_URL, http_client=http)


@pytest.fixture
def sample_crime() -> dict[str, Any]:
    """A geocoded crime as returned by /crimes-street."""
    return {
        "category": "anti-social-behaviour",
        "persistent_id": "",
        "location_subtype": "",
        "id": 116208998,
        "location": {
            "latitude": "52.632805",
            "street": {"id": 1738842, "name": "On or near Campbell Street"},
            "longitude": "-1.124819",
        },
        "context": "",
        "month": "2024-01",
        "location_type": "Force",
        "outcome_status": {
            "category": "Investigation complete; no suspect identified",
            "date": "2024-01",
        },
    }


@pytest.fixture
def sample_unlocated_crime() -> dict[str, Any]:
    """A crime from /crimes-no-location."""
    return {
        "category": "burglary",
        "persistent_id": "abc123",
        "location_subtype": "",
        "id": 999,
        "location": None,
        "context": "",
        "month": "2024-01",
        "location_type": None,
        "outcome_status": None,
    }


@pytest.fixture
def sample_outcome() -> dict[str, Any]:
    """A street-level outcome with its embedded crime."""
    return {
        "category": {"code": "local-resolution", "name": "Local resolution"},
        "date": "2024-01",
        "person_id": None,
        "crime": {
            "category": "public-order",
            "persistent_id": PERSISTENT_ID,
            "location_subtype": "ROAD",
            "location_type": "Force",
            "location": {
                "latitude": "52.637146",
                "street": {"id": 1737432, "name": "On or near Vaughan Street"},
                "longitude": "-1.149381",
            },
            "context": "",
            "month": "2024-01",
            "id": 116202605,
        },
    }


@pytest.fixture
def sample_stop() -> dict[str, Any]:
    """A stop and search record from /stops-street."""
    return {
        "age_range": "18-24",
        "outcome": "Arrest",
        "involved_person": True,
        "self_defined_ethnicity": "White - English/Welsh/Scottish/Northern Irish/British",
        "gender": "Male",
        "legislation": "Misuse of Drugs Act 1971 (section 23)",
        "outcome_linked_to_object_of_search": True,
        "datetime": "2024-01-05T14:30:00+00:00",
        "removal_of_more_than_outer_clothing": False,
        "outcome_object": {"id": "bu-arrest", "name": "Arrest"},
        "location": {
            "latitude": "52.634407",
            "street": {"id": 883407, "name": "On or near Shopping Area"},
            "longitude": "-1.131853",
        },
        "operation": False,
        "officer_defined_ethnicity": "White",
        "type": "Person search",
        "operation_name": None,
        "object_of_search": "Controlled drugs",
    }


@pytest.fixture
def sample_neighbourhood() -> dict[str, Any]:
    """A neighbourhood detail record."""
    return {
        "url_force": "https://www.leics.police.uk/local-policing/city-centre",
        "contact_details": {
            "twitter": "http://www.twitter.com/centralleicsNPA",
            "facebook": "http://www.facebook.com/leicspolice",
            "telephone": "101",
            "email": "centralleicester.npa@leicestershire.pnn.police.uk",
            "e-messaging": "https://www.leics.police.uk/contact",
        },
        "name": "City Centre",
        "links": [
            {
                "url": "http://www.leicester.gov.uk/",
                "description": None,
                "title": "Leicester City Council",
            }
        ],
        "centre": {"latitude": "52.6389", "longitude": "-1.13619"},
        "locations": [
            {
                "name": "Mansfield House",
                "longitude": None,
                "postcode": "LE1 3GG",
                "address": "74 Belgrave Gate\n, Leicester",
                "latitude": None,
                "type": "station",
                "description": None,
            }
        ],
        "description": "<p>The Castle neighbourhood is a diverse area.</p>",
        "id": "NC04",
        "population": "0",
    }
