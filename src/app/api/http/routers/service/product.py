"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from loguru import logger
from sqlmodel import Session

from src.app.api.http.deps import get_session
from src.app.api.http.schemas import CollectionResult
from src.app.entities import Product, ProductOptionRepository, ProductRepository
from src.app.entities.core._base import new_id
from src.app.entities.core._repository import EntityNotFoundError

router = APIRouter(tags=["products"])


@router.get("", response_model=CollectionResult[Product])
def list_products(
    name: str | None = None,
    session: Session = Depends(get_session),
) -> CollectionResult[Product]:
    """List all products, or those whose name matches ``name`` exactly."""
    repository = ProductRepository(session)
    return CollectionResult[Product](items=repository.list_all(name))


@router.get("/{item_id}", response_model=Product)
def get_product(
    item_id: str,
    session: Session = Depends(get_session),
) -> Product:
    """Get a product by ID."""
    repository = ProductRepository(session)
    product = repository.get(item_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product: Product,
    request: Request,
    response: Response,
    session: Session = Depends(get_session),
) -> Product:
    """Create a new product."""
    repository = ProductRepository(session)

    # Identifiers are always assigned by the server
    product.id = new_id()

    created_product = repository.create(product)
    session.commit()
    logger.info("Created product {}", created_product.id)

    response.headers["Location"] = str(
        request.url_for("get_product", item_id=created_product.id)
    )
    return created_product


@router.put("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    item_id: str,
    product_update: Product,
    session: Session = Depends(get_session),
) -> Response:
    """Replace a product."""
    repository = ProductRepository(session)

    # Ensure the ID matches
    product_update.id = item_id

    try:
        repository.update(product_update)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    session.commit()
    logger.info("Updated product {}", item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{item_id}", response_model=Product)
def delete_product(
    item_id: str,
    session: Session = Depends(get_session),
) -> Product:
    """Delete a product together with all of its options."""
    products = ProductRepository(session)
    options = ProductOptionRepository(session)

    # Both deletes belong to the same transaction, committed once below
    removed_options = options.delete_all_for_product(item_id)
    deleted = products.delete(item_id)
    if deleted is None:
        session.rollback()
        raise HTTPException(status_code=404, detail="Product not found")

    session.commit()
    logger.info("Deleted product {} and {} options", item_id, removed_options)
    return deleted
