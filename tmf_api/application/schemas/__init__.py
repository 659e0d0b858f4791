from .common import (
    Characteristic,
    ContactMedium,
    MediumCharacteristic,
    RelatedPartyRef,
    TimePeriod,
    TMFModel,
    TypedModel,
)
from .customer import CustomerCreate, CustomerUpdate, EngagedPartyRef
from .error import ErrorResponse
from .geographic_address import (
    GeographicAddressCreate,
    GeographicAddressUpdate,
    GeographicLocation,
    GeographicSubAddressCreate,
)
from .hub import HubSubscriptionCreate, HubSubscriptionResponse
from .party import (
    IndividualCreate,
    IndividualUpdate,
    OrganizationCreate,
    OrganizationUpdate,
    PartyCreate,
)
from .product_catalog import (
    CatalogCreate,
    CatalogUpdate,
    CategoryCreate,
    CategoryRef,
    CategoryUpdate,
    ProductOfferingCreate,
    ProductOfferingUpdate,
    ProductSpecCharacteristic,
    ProductSpecificationCreate,
    ProductSpecificationRef,
    ProductSpecificationUpdate,
)

__all__ = [
    "Characteristic",
    "ContactMedium",
    "MediumCharacteristic",
    "RelatedPartyRef",
    "TimePeriod",
    "TMFModel",
    "TypedModel",
    "CustomerCreate",
    "CustomerUpdate",
    "EngagedPartyRef",
    "ErrorResponse",
    "GeographicAddressCreate",
    "GeographicAddressUpdate",
    "GeographicLocation",
    "GeographicSubAddressCreate",
    "HubSubscriptionCreate",
    "HubSubscriptionResponse",
    "IndividualCreate",
    "IndividualUpdate",
    "OrganizationCreate",
    "OrganizationUpdate",
    "PartyCreate",
    "CatalogCreate",
    "CatalogUpdate",
    "CategoryCreate",
    "CategoryRef",
    "CategoryUpdate",
    "ProductOfferingCreate",
    "ProductOfferingUpdate",
    "ProductSpecCharacteristic",
    "ProductSpecificationCreate",
    "ProductSpecificationRef",
    "ProductSpecificationUpdate",
]
