"""Shared model base and tolerant field decoders.

Some fields change JSON shape from one endpoint to another. Rather than
typing them as ``Any``, each shape is captured by a small ``Annotated``
type whose before-validator maps every accepted form onto one Python type
and rejects the rest.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from police_api.schemas.categories import OutcomeCategory, decode_category


class APIModel(BaseModel):
    """Base for every decoded API entity.

    Strict (no str/int coercion), immutable, and tolerant of keys the
    service adds in future.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
        extra="ignore",
    )


def false_as_absent(value: Any) -> str | None:
    """Decode a ``string | false | null`` field; only the string is a value."""
    if value is None or value is False:
        return None
    if isinstance(value, str):
        return value
    raise ValueError(f"expected a string, false or null, got {value!r}")


def category_from_spelling(value: Any) -> OutcomeCategory:
    """Decode either spelling of an outcome category."""
    if isinstance(value, OutcomeCategory):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected an outcome category string, got {value!r}")
    return decode_category(value)


OptionalOutcomeText = Annotated[str | None, BeforeValidator(false_as_absent)]

Category = Annotated[OutcomeCategory, BeforeValidator(category_from_spelling)]

# Ids the API documents as unsigned 64-bit
UInt64 = Annotated[int, Field(ge=0, lt=2**64)]
