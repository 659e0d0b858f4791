from .customer_repository import SQLAlchemyCustomerRepository
from .entity_repository import ChildTable, SQLAlchemyEntityRepository
from .geographic_address_repository import SQLAlchemyGeographicAddressRepository
from .hub_subscription_repository import SQLAlchemyHubSubscriptionRepository
from .party_repository import (
    SQLAlchemyIndividualRepository,
    SQLAlchemyOrganizationRepository,
)
from .product_catalog_repository import (
    SQLAlchemyCatalogRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyProductOfferingRepository,
    SQLAlchemyProductSpecificationRepository,
)

__all__ = [
    "SQLAlchemyCustomerRepository",
    "ChildTable",
    "SQLAlchemyEntityRepository",
    "SQLAlchemyGeographicAddressRepository",
    "SQLAlchemyHubSubscriptionRepository",
    "SQLAlchemyIndividualRepository",
    "SQLAlchemyOrganizationRepository",
    "SQLAlchemyCatalogRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyProductOfferingRepository",
    "SQLAlchemyProductSpecificationRepository",
]
