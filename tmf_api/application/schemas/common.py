"""Pydantic DTOs shared by every TMF API family.

Python attributes are snake_case; the wire uses TMF camelCase and the
"@"-prefixed annotation keys. Both spellings are accepted on input.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TMFModel(BaseModel):
    """Base for TMF request bodies — camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TypedModel(TMFModel):
    """Adds the pass-through @type / @baseType / @schemaLocation tags."""

    type: str | None = Field(None, alias="@type", examples=["Catalog"])
    base_type: str | None = Field(None, alias="@baseType")
    schema_location: str | None = Field(None, alias="@schemaLocation")


class TimePeriod(TMFModel):
    """Validity window — either bound may be absent."""

    start_date_time: datetime | None = Field(None, examples=["2024-01-01T00:00:00Z"])
    end_date_time: datetime | None = None


class RelatedPartyRef(TMFModel):
    """Reference to a party playing a role for the owning entity."""

    id: str
    href: str | None = None
    name: str | None = None
    role: str = Field(..., min_length=1, examples=["owner"])
    referred_type: str = Field(..., alias="@referredType", examples=["Organization"])
    type: str | None = Field(None, alias="@type")


class Characteristic(TMFModel):
    """Free-form name/value pair describing a customer or party."""

    name: str = Field(..., min_length=1)
    value: Any = None
    value_type: str | None = None
    type: str | None = Field(None, alias="@type")


class MediumCharacteristic(TMFModel):
    """Address / number / email details of a contact medium."""

    city: str | None = None
    contact_type: str | None = None
    country: str | None = None
    email_address: str | None = None
    fax_number: str | None = None
    phone_number: str | None = None
    post_code: str | None = None
    social_network_id: str | None = None
    state_or_province: str | None = None
    street1: str | None = None
    street2: str | None = None
    type: str | None = Field(None, alias="@type")


class ContactMedium(TMFModel):
    """A way to reach a customer or party."""

    medium_type: str = Field(..., min_length=1, examples=["email"])
    preferred: bool | None = None
    characteristic: MediumCharacteristic | None = None
    valid_for: TimePeriod | None = None
    type: str | None = Field(None, alias="@type")
