"""Product repository."""

from src.app.entities.core._repository import SqlModelRepository

from .entity import Product
from .table import ProductTable


class ProductRepository(SqlModelRepository[Product, ProductTable]):
    """Data-access layer for products."""

    entity_type = Product
    table_type = ProductTable

    def list_all(self, name: str | None = None) -> list[Product]:
        """All products, or only those whose name equals ``name`` exactly."""
        if name:
            return self.find(ProductTable.name == name)
        return self.find()
