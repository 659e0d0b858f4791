"""FastAPI dependency injection — wires infrastructure to application layer.

Every request gets its own session; services, repositories and the hub
publisher are built on top of it. Nothing in the request path is a
module-level singleton; settings, the session factory and the webhook
client live on ``app.state`` and are set up by ``create_app``.
"""

from collections.abc import AsyncGenerator, Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tmf_api.application.services import (
    CatalogService,
    CategoryService,
    CustomerService,
    EntityService,
    GeographicAddressService,
    HubService,
    IndividualService,
    OrganizationService,
    ProductOfferingService,
    ProductSpecificationService,
)
from tmf_api.config import Settings
from tmf_api.domain.apis import TMFApi
from tmf_api.domain.entities import PaginationParams
from tmf_api.infrastructure.database.repositories import (
    SQLAlchemyCatalogRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyCustomerRepository,
    SQLAlchemyEntityRepository,
    SQLAlchemyGeographicAddressRepository,
    SQLAlchemyHubSubscriptionRepository,
    SQLAlchemyIndividualRepository,
    SQLAlchemyOrganizationRepository,
    SQLAlchemyProductOfferingRepository,
    SQLAlchemyProductSpecificationRepository,
)
from tmf_api.infrastructure.database.session import after_commit, get_db_session
from tmf_api.infrastructure.events import HubEventPublisher


def get_pagination(request: Request) -> PaginationParams:
    """Pagination window parsed by the pagination middleware."""
    pagination = getattr(request.state, "pagination", None)
    if pagination is None:
        return PaginationParams()
    return pagination


def _build_hub_service(api: TMFApi, request: Request, session: AsyncSession) -> HubService:
    settings: Settings = request.app.state.settings
    return HubService(
        api=api.name,
        repository=SQLAlchemyHubSubscriptionRepository(session, api.name),
        webhook_client=request.app.state.webhook_client,
        max_concurrency=settings.hub_delivery_concurrency,
    )


def hub_service_provider(api: TMFApi) -> Callable[..., AsyncGenerator[HubService, None]]:
    """Dependency factory — a HubService scoped to one API family."""

    async def get_hub_service(
        request: Request,
        session: AsyncSession = Depends(get_db_session),
    ) -> AsyncGenerator[HubService, None]:
        yield _build_hub_service(api, request, session)

    return get_hub_service


def entity_service_provider(
    service_cls: type[EntityService],
    repository_cls: type[SQLAlchemyEntityRepository],
) -> Callable[..., AsyncGenerator[EntityService, None]]:
    """Dependency factory — an entity service whose events reach its family's hub after commit."""

    async def get_entity_service(
        request: Request,
        session: AsyncSession = Depends(get_db_session),
    ) -> AsyncGenerator[EntityService, None]:
        settings: Settings = request.app.state.settings
        publisher = HubEventPublisher(
            _build_hub_service(service_cls.api, request, session)
        )
        after_commit(session, publisher.flush)
        yield service_cls(
            repository_cls(session),
            base_url=settings.public_base_url,
            publisher=publisher,
        )

    return get_entity_service


get_catalog_service = entity_service_provider(CatalogService, SQLAlchemyCatalogRepository)
get_category_service = entity_service_provider(CategoryService, SQLAlchemyCategoryRepository)
get_product_offering_service = entity_service_provider(
    ProductOfferingService, SQLAlchemyProductOfferingRepository
)
get_product_specification_service = entity_service_provider(
    ProductSpecificationService, SQLAlchemyProductSpecificationRepository
)
get_customer_service = entity_service_provider(CustomerService, SQLAlchemyCustomerRepository)
get_individual_service = entity_service_provider(
    IndividualService, SQLAlchemyIndividualRepository
)
get_organization_service = entity_service_provider(
    OrganizationService, SQLAlchemyOrganizationRepository
)
get_geographic_address_service = entity_service_provider(
    GeographicAddressService, SQLAlchemyGeographicAddressRepository
)
