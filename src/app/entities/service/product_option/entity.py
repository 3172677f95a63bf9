"""Entity: ProductOption."""

from pydantic import Field

from src.app.entities.core._base import Entity, NonBlankStr


class ProductOption(Entity):
    """An option (variant) offered for exactly one product.

    ``product_id`` links the option to its owner. It is never serialized:
    clients address options through the owning product's URL instead.
    """

    name: NonBlankStr = Field(description="Option name")
    description: NonBlankStr = Field(description="Option description")
    product_id: str | None = Field(
        default=None, exclude=True, description="Identifier of the owning product"
    )
