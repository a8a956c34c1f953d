"""Pydantic schemas for crimes, outcomes and crime metadata."""

from pydantic import Field

from police_api.schemas.fields import APIModel, Category, UInt64


class CrimeCategory(APIModel):
    """A category of crime, e.g. Burglary."""

    url: str  # slug, e.g. "anti-social-behaviour"
    name: str


class CrimeLastUpdated(APIModel):
    """Month of the latest crime data. The day part is always 01."""

    date: str


class CrimeDataAvailability(APIModel):
    """A month of available street-level data and the forces with stop and search data for it."""

    date: str
    stop_and_search: tuple[str, ...] = Field(alias="stop-and-search")


class Street(APIModel):
    """Approximate street-level location. ``id`` is reusable as a LocationId."""

    id: UInt64
    name: str


class Location(APIModel):
    """Anonymised location of a crime or stop.

    Latitude and longitude are kept as the API's decimal strings.
    """

    latitude: str
    longitude: str
    street: Street


class OutcomeStatus(APIModel):
    """Latest outcome of a crime, as embedded in the crime itself."""

    category: Category
    date: str


class Crime(APIModel):
    """A street-level crime record."""

    category: str
    persistent_id: str
    location_subtype: str
    id: UInt64
    context: str
    month: str

    # Absent together for crimes that could not be geocoded
    location: Location | None = None
    location_type: str | None = None

    outcome_status: OutcomeStatus | None = None


class OutcomeDetail(APIModel):
    """``{code, name}`` pair describing an outcome category."""

    code: Category
    name: str


class Outcome(APIModel):
    """A street-level outcome with the full crime it belongs to."""

    category: OutcomeDetail
    date: str
    person_id: str | None = None
    crime: Crime


class CrimeOutcome(APIModel):
    """One entry of a crime's outcome history."""

    category: OutcomeDetail
    date: str
    person_id: str | None = None


class CrimeOutcomes(APIModel):
    """A crime and its outcomes, in the order the API returned them."""

    crime: Crime
    outcomes: tuple[CrimeOutcome, ...]
