from .customer_service import CustomerService
from .entity_service import EntityService
from .geographic_address_service import GeographicAddressService
from .hub_service import HubService
from .party_service import IndividualService, OrganizationService
from .product_catalog_service import (
    CatalogService,
    CategoryService,
    ProductOfferingService,
    ProductSpecificationService,
)

__all__ = [
    "CustomerService",
    "EntityService",
    "GeographicAddressService",
    "HubService",
    "IndividualService",
    "OrganizationService",
    "CatalogService",
    "CategoryService",
    "ProductOfferingService",
    "ProductSpecificationService",
]
