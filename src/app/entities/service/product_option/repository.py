"""Product option repository."""

from sqlalchemy import exists

from src.app.entities.core._repository import SqlModelRepository
from src.app.entities.service.product.table import ProductTable

from .entity import ProductOption
from .table import ProductOptionTable


class ProductOptionRepository(SqlModelRepository[ProductOption, ProductOptionTable]):
    """Data-access layer for product options, always scoped by product."""

    entity_type = ProductOption
    table_type = ProductOptionTable

    def list_for_product(self, product_id: str) -> list[ProductOption]:
        return self.find(ProductOptionTable.product_id == product_id)

    def get_for_product(self, product_id: str, option_id: str) -> ProductOption | None:
        return self.first(
            ProductOptionTable.id == option_id,
            ProductOptionTable.product_id == product_id,
        )

    def product_exists(self, product_id: str) -> bool:
        return self._session.get(ProductTable, product_id) is not None

    def update_for_product(self, option: ProductOption) -> ProductOption:
        """Replace ``option`` provided its target product exists.

        The option is matched on its id only, so an option can be re-parented
        by updating it through another product's URL.

        Raises:
            EntityNotFoundError: the option id or the target product is unknown.
        """
        return self.update(
            option, exists().where(ProductTable.id == option.product_id)
        )

    def delete_for_product(self, product_id: str, option_id: str) -> ProductOption | None:
        return self.delete(option_id, ProductOptionTable.product_id == product_id)

    def delete_all_for_product(self, product_id: str) -> int:
        return self.delete_where(ProductOptionTable.product_id == product_id)
