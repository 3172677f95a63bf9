"""Product option database table model."""

from sqlalchemy import Column, ForeignKey, String
from sqlmodel import Field

from src.app.entities.core._base import EntityTable


class ProductOptionTable(EntityTable, table=True):
    """Database persistence model for product options.

    Options are removed together with their product through the
    ``ON DELETE CASCADE`` foreign key.
    """

    __tablename__ = "product_options"

    name: str
    description: str
    product_id: str = Field(
        sa_column=Column(
            String,
            ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
