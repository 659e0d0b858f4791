"""ORM models for the TMF620 Product Catalog tables."""

from typing import Any

from sqlalchemy import Boolean, ForeignKey, Index, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tmf_api.infrastructure.database.base import Base
from tmf_api.infrastructure.database.columns import (
    ChildRowMixin,
    LifecycleMixin,
    RelatedPartyColumnsMixin,
    TMForumEntityMixin,
    ValidForMixin,
)


class CatalogModel(TMForumEntityMixin, ValidForMixin, LifecycleMixin, Base):
    __tablename__ = "catalogs"

    catalog_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    version: Mapped[str | None] = mapped_column(String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<CatalogModel(id={self.id}, name='{self.name}')>"


class CategoryModel(TMForumEntityMixin, ValidForMixin, LifecycleMixin, Base):
    """Categories nest through ``parent_id``; deleting a parent removes its subtree."""

    __tablename__ = "categories"

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_root: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    version: Mapped[str | None] = mapped_column(String(50), nullable=True)
    parent_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("categories.id", ondelete="CASCADE"), nullable=True,
    )

    __table_args__ = (Index("ix_categories_parent", "parent_id"),)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name='{self.name}')>"


class ProductOfferingModel(TMForumEntityMixin, ValidForMixin, LifecycleMixin, Base):
    __tablename__ = "product_offerings"

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_bundle: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    is_sellable: Mapped[bool | None] = mapped_column(Boolean, default=True, nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status_reason: Mapped[str | None] = mapped_column(String(500), nullable=True)
    version: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # Reference only; the product specification may live in another catalog.
    product_specification_id: Mapped[str | None] = mapped_column(
        String(36), nullable=True,
    )

    def __repr__(self) -> str:
        return f"<ProductOfferingModel(id={self.id}, name='{self.name}')>"


class ProductSpecificationModel(TMForumEntityMixin, ValidForMixin, LifecycleMixin, Base):
    __tablename__ = "product_specifications"

    brand: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_bundle: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    product_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    version: Mapped[str | None] = mapped_column(String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<ProductSpecificationModel(id={self.id}, name='{self.name}')>"


class CatalogCategoryModel(ChildRowMixin, Base):
    __tablename__ = "catalog_categories"

    catalog_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("catalogs.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
    category_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("categories.id", ondelete="CASCADE"), nullable=False,
    )


class CatalogRelatedPartyModel(RelatedPartyColumnsMixin, Base):
    __tablename__ = "catalog_related_parties"

    catalog_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("catalogs.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )


class ProductOfferingCategoryModel(ChildRowMixin, Base):
    __tablename__ = "product_offering_categories"

    product_offering_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("product_offerings.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    category_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("categories.id", ondelete="CASCADE"), nullable=False,
    )


class ProductSpecCharacteristicModel(ChildRowMixin, ValidForMixin, Base):
    __tablename__ = "product_spec_characteristics"

    product_specification_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("product_specifications.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    configurable: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    extensible: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    is_unique: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    max_cardinality: Mapped[int | None] = mapped_column(Integer, nullable=True)
    min_cardinality: Mapped[int | None] = mapped_column(Integer, nullable=True)
    regex: Mapped[str | None] = mapped_column(String(500), nullable=True)
    value_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    product_spec_characteristic_value: Mapped[list[Any] | None] = mapped_column(
        "characteristic_values", JSON, nullable=True,
    )
