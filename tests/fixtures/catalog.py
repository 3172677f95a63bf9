"""Catalogue data fixtures."""

from __future__ import annotations

import pytest
from sqlmodel import Session

from src.app.core.services import DbManageService
from src.app.entities import (
    Product,
    ProductOption,
    ProductOptionRepository,
    ProductRepository,
)


@pytest.fixture
def seeded_products(manage_service: DbManageService) -> list[Product]:
    """Three products; the first one owns options "PO 1".."PO 3"."""
    return manage_service.seed()


@pytest.fixture
def first_product(seeded_products: list[Product]) -> Product:
    return seeded_products[0]


@pytest.fixture
def product_factory(session: Session):
    """Persist a product with sensible defaults and return it."""

    def _create(**overrides) -> Product:
        data = {
            "name": "Widget",
            "description": "A widget",
            "price": 9.99,
            "delivery_price": 1.5,
        }
        data.update(overrides)
        product = ProductRepository(session).create(Product(**data))
        session.commit()
        return product

    return _create


@pytest.fixture
def option_factory(session: Session):
    """Persist an option for the given product and return it."""

    def _create(product_id: str, **overrides) -> ProductOption:
        data = {"name": "Colour", "description": "Red"}
        data.update(overrides)
        option = ProductOptionRepository(session).create(
            ProductOption(product_id=product_id, **data)
        )
        session.commit()
        return option

    return _create
