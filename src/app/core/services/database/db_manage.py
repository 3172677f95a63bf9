"""Schema management and sample data for the catalogue database."""

from loguru import logger
from sqlmodel import SQLModel

from src.app.core.services.database.db_session import DbSessionService
from src.app.entities import (
    Product,
    ProductOption,
    ProductOptionRepository,
    ProductRepository,
)

SAMPLE_PRODUCTS = [
    {"name": "Product 1 Name", "description": "Product 1 Description", "price": 1.11, "delivery_price": 1.1},
    {"name": "Product 2 Name", "description": "Product 2 Description", "price": 2.22, "delivery_price": 2.2},
    {"name": "Product 3 Name", "description": "Product 3 Description", "price": 3.33, "delivery_price": 3.3},
]

# Options attached to the first sample product
SAMPLE_OPTIONS = [
    {"name": f"PO {n} Name", "description": f"PO {n} Description"} for n in (1, 2, 3)
]


class DbManageService:
    def __init__(self, database_service: DbSessionService):
        self._database_service = database_service

    def create_all(self) -> None:
        """Create all database tables."""
        from src.app.entities import ProductOptionTable, ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._database_service.engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        SQLModel.metadata.drop_all(self._database_service.engine)
        logger.warning("Database tables dropped.")

    def seed(self) -> list[Product]:
        """Insert the sample catalogue and return the created products."""
        with self._database_service.session_scope() as session:
            products = ProductRepository(session)
            options = ProductOptionRepository(session)

            created = [products.create(Product(**data)) for data in SAMPLE_PRODUCTS]
            for data in SAMPLE_OPTIONS:
                options.create(ProductOption(product_id=created[0].id, **data))

        logger.info(
            "Seeded {} products and {} options", len(created), len(SAMPLE_OPTIONS)
        )
        return created
