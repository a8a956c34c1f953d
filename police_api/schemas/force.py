"""Pydantic schemas for police forces and their officers."""

from pydantic import Field

from police_api.schemas.fields import APIModel


class Force(APIModel):
    """Force summary."""

    id: str
    name: str


class EngagementMethod(APIModel):
    """A way of keeping informed about a force (twitter, facebook, rss, ...)."""

    kind: str = Field(alias="type")
    title: str | None = None
    description: str | None = None
    url: str | None = None


class ForceDetail(APIModel):
    """Detailed information about a force."""

    id: str
    name: str
    description: str | None = None
    url: str | None = None
    telephone: str | None = None
    engagement_methods: tuple[EngagementMethod, ...]


class ContactDetails(APIModel):
    """Contact details for an officer, team or event. Every field is optional."""

    email: str | None = None
    telephone: str | None = None
    mobile: str | None = None
    fax: str | None = None
    web: str | None = None
    address: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    youtube: str | None = None
    myspace: str | None = None
    bebo: str | None = None
    flickr: str | None = None
    google_plus: str | None = Field(default=None, alias="google-plus")
    forum: str | None = None
    e_messaging: str | None = Field(default=None, alias="e-messaging")
    blog: str | None = None
    rss: str | None = None


class SeniorOfficer(APIModel):
    """A senior officer of a force, or a member of a neighbourhood team."""

    name: str
    rank: str
    bio: str | None = None
    contact_details: ContactDetails
