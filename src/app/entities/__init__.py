"""Entities module with hybrid entity-centric structure.

This module organizes entities by business concept rather than technical layer.
Each entity has its own package containing:
- entity.py: Domain model with validation, also used as the API schema
- table.py: Database persistence model
- repository.py: Data access layer bound to the generic persistence port
"""

from .service.product import Product, ProductRepository, ProductTable
from .service.product_option import (
    ProductOption,
    ProductOptionRepository,
    ProductOptionTable,
)

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
    "ProductOption",
    "ProductOptionTable",
    "ProductOptionRepository",
]
