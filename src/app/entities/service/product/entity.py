"""Entity: Product."""

from pydantic import Field

from src.app.entities.core._base import Entity, NonBlankStr


class Product(Entity):
    """Product entity representing an item in the catalogue.

    This is the domain model that carries field validation. It is also the
    request and response schema of the products API.
    """

    name: NonBlankStr = Field(description="Product name")
    description: NonBlankStr = Field(description="Product description")
    price: float = Field(ge=0, allow_inf_nan=False, description="Unit price")
    delivery_price: float = Field(ge=0, allow_inf_nan=False, description="Delivery price")
