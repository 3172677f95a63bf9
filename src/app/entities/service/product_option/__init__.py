"""Entity package: ProductOption."""

from .entity import ProductOption
from .repository import ProductOptionRepository
from .table import ProductOptionTable

__all__ = ["ProductOption", "ProductOptionRepository", "ProductOptionTable"]
