"""Repositories for the TMF620 Product Catalog tables."""

from tmf_api.infrastructure.database.models import (
    CatalogCategoryModel,
    CatalogModel,
    CatalogRelatedPartyModel,
    CategoryModel,
    ProductOfferingCategoryModel,
    ProductOfferingModel,
    ProductSpecCharacteristicModel,
    ProductSpecificationModel,
)

from .entity_repository import ChildTable, SQLAlchemyEntityRepository


class SQLAlchemyCatalogRepository(SQLAlchemyEntityRepository):
    model = CatalogModel
    children = {
        "category": ChildTable(CatalogCategoryModel, "catalog_id"),
        "related_party": ChildTable(CatalogRelatedPartyModel, "catalog_id"),
    }


class SQLAlchemyCategoryRepository(SQLAlchemyEntityRepository):
    """``sub_category`` is the set of categories whose parent is this one."""

    model = CategoryModel
    children = {"sub_category": ChildTable(CategoryModel, "parent_id")}


class SQLAlchemyProductOfferingRepository(SQLAlchemyEntityRepository):
    model = ProductOfferingModel
    children = {
        "category": ChildTable(ProductOfferingCategoryModel, "product_offering_id"),
    }


class SQLAlchemyProductSpecificationRepository(SQLAlchemyEntityRepository):
    model = ProductSpecificationModel
    children = {
        "product_spec_characteristic": ChildTable(
            ProductSpecCharacteristicModel, "product_specification_id"
        ),
    }
