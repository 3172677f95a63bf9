"""Response envelopes shared by the API routers."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class CollectionResult(BaseModel, Generic[T]):
    """List response wrapper, serialized as ``{"items": [...]}``."""

    items: list[T]
