"""Pydantic DTOs for the TMF632 Party family (Individual, Organization)."""

from datetime import date

from pydantic import Field

from .common import Characteristic, ContactMedium, RelatedPartyRef, TimePeriod, TypedModel


class PartyCreate(TypedModel):
    """Fields common to both party kinds."""

    status: str | None = None
    valid_for: TimePeriod | None = None
    contact_medium: list[ContactMedium] | None = None
    party_characteristic: list[Characteristic] | None = None
    related_party: list[RelatedPartyRef] | None = None


class IndividualCreate(PartyCreate):
    """Schema for creating an individual."""

    birth_date: date | None = None
    country_of_birth: str | None = None
    death_date: date | None = None
    family_name: str | None = Field(None, examples=["Doe"])
    formatted_name: str | None = None
    full_name: str | None = None
    gender: str | None = None
    given_name: str | None = Field(None, examples=["Jane"])
    location: str | None = None
    marital_status: str | None = None
    middle_name: str | None = None
    nationality: str | None = None
    place_of_birth: str | None = None
    title: str | None = None


class IndividualUpdate(IndividualCreate):
    """Schema for patching an individual — every field optional."""


class OrganizationCreate(PartyCreate):
    """Schema for creating an organization."""

    is_head_office: bool | None = None
    is_legal_entity: bool | None = None
    name: str | None = Field(None, examples=["Acme Corp"])
    name_type: str | None = None
    organization_type: str | None = None
    trading_name: str | None = None


class OrganizationUpdate(OrganizationCreate):
    """Schema for patching an organization — every field optional."""
