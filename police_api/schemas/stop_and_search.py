"""Pydantic schemas for stop and search records."""

from enum import Enum

from pydantic import Field

from police_api.schemas.crime import Location
from police_api.schemas.fields import APIModel, OptionalOutcomeText


class StopAndSearchType(str, Enum):
    PERSON = "Person search"
    VEHICLE = "Vehicle search"
    PERSON_AND_VEHICLE = "Person and Vehicle search"


class OutcomeObject(APIModel):
    """Outcome id/name pair returned alongside the textual outcome."""

    id: str | None = None
    name: str | None = None


class StopAndSearch(APIModel):
    """A stop and search record. No field is guaranteed by the API."""

    kind: StopAndSearchType | None = Field(default=None, alias="type")
    involved_person: bool | None = None
    datetime: str | None = None
    operation: bool | None = None
    operation_name: str | None = None
    location: Location | None = None

    gender: str | None = None
    age_range: str | None = None
    self_defined_ethnicity: str | None = None
    officer_defined_ethnicity: str | None = None
    legislation: str | None = None
    object_of_search: str | None = None

    # "false" on some endpoints when nothing was found
    outcome: OptionalOutcomeText = None
    outcome_object: OutcomeObject | None = None
    outcome_linked_to_object_of_search: bool | None = None
    removal_of_more_than_outer_clothing: bool | None = None
