from .customer import (
    CustomerCharacteristicModel,
    CustomerContactMediumModel,
    CustomerModel,
    CustomerRelatedPartyModel,
)
from .geographic_address import GeographicAddressModel, GeographicSubAddressModel
from .hub_subscription import EventSubscriptionModel
from .party import (
    PartyCharacteristicModel,
    PartyContactMediumModel,
    PartyModel,
    PartyRelatedPartyModel,
)
from .product_catalog import (
    CatalogCategoryModel,
    CatalogModel,
    CatalogRelatedPartyModel,
    CategoryModel,
    ProductOfferingCategoryModel,
    ProductOfferingModel,
    ProductSpecCharacteristicModel,
    ProductSpecificationModel,
)

__all__ = [
    "CustomerCharacteristicModel",
    "CustomerContactMediumModel",
    "CustomerModel",
    "CustomerRelatedPartyModel",
    "GeographicAddressModel",
    "GeographicSubAddressModel",
    "EventSubscriptionModel",
    "PartyCharacteristicModel",
    "PartyContactMediumModel",
    "PartyModel",
    "PartyRelatedPartyModel",
    "CatalogCategoryModel",
    "CatalogModel",
    "CatalogRelatedPartyModel",
    "CategoryModel",
    "ProductOfferingCategoryModel",
    "ProductOfferingModel",
    "ProductSpecCharacteristicModel",
    "ProductSpecificationModel",
]
