"""Pydantic DTOs for the TMF629 Customer family."""

from pydantic import Field

from .common import (
    Characteristic,
    ContactMedium,
    RelatedPartyRef,
    TimePeriod,
    TMFModel,
    TypedModel,
)


class EngagedPartyRef(TMFModel):
    """The party (individual or organization) acting as the customer."""

    id: str
    href: str | None = None
    name: str | None = None
    referred_type: str = Field(..., alias="@referredType", examples=["Individual"])


class CustomerCreate(TypedModel):
    """Schema for creating a customer — engagedParty is mandatory."""

    name: str | None = None
    status: str | None = None
    status_reason: str | None = None
    valid_for: TimePeriod | None = None
    engaged_party: EngagedPartyRef
    characteristic: list[Characteristic] | None = None
    contact_medium: list[ContactMedium] | None = None
    related_party: list[RelatedPartyRef] | None = None


class CustomerUpdate(TypedModel):
    """Schema for patching a customer — all fields optional."""

    name: str | None = None
    status: str | None = None
    status_reason: str | None = None
    valid_for: TimePeriod | None = None
    engaged_party: EngagedPartyRef | None = None
    characteristic: list[Characteristic] | None = None
    contact_medium: list[ContactMedium] | None = None
    related_party: list[RelatedPartyRef] | None = None
