"""Product option API router, nested under a product."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from loguru import logger
from sqlmodel import Session

from src.app.api.http.deps import get_session
from src.app.api.http.schemas import CollectionResult
from src.app.entities import ProductOption, ProductOptionRepository
from src.app.entities.core._base import new_id
from src.app.entities.core._repository import EntityNotFoundError

router = APIRouter(tags=["product options"])


@router.get("", response_model=CollectionResult[ProductOption])
def list_product_options(
    product_id: str,
    session: Session = Depends(get_session),
) -> CollectionResult[ProductOption]:
    """List the options of a product."""
    repository = ProductOptionRepository(session)
    if not repository.product_exists(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return CollectionResult[ProductOption](
        items=repository.list_for_product(product_id)
    )


@router.get("/{item_id}", response_model=ProductOption)
def get_product_option(
    product_id: str,
    item_id: str,
    session: Session = Depends(get_session),
) -> ProductOption:
    """Get one option of a product."""
    repository = ProductOptionRepository(session)
    option = repository.get_for_product(product_id, item_id)
    if option is None:
        raise HTTPException(status_code=404, detail="Product option not found")
    return option


@router.post("", response_model=ProductOption, status_code=status.HTTP_201_CREATED)
def create_product_option(
    product_id: str,
    option: ProductOption,
    request: Request,
    response: Response,
    session: Session = Depends(get_session),
) -> ProductOption:
    """Create an option for an existing product."""
    repository = ProductOptionRepository(session)
    if not repository.product_exists(product_id):
        logger.info("Refusing option for unknown product {}", product_id)
        raise HTTPException(status_code=400, detail="Product does not exist")

    option.id = new_id()
    option.product_id = product_id

    created_option = repository.create(option)
    session.commit()
    logger.info("Created option {} for product {}", created_option.id, product_id)

    response.headers["Location"] = str(
        request.url_for(
            "get_product_option", product_id=product_id, item_id=created_option.id
        )
    )
    return created_option


@router.put("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product_option(
    product_id: str,
    item_id: str,
    option_update: ProductOption,
    session: Session = Depends(get_session),
) -> Response:
    """Replace an option.

    The option is looked up by its id alone; updating it through another
    product's URL moves it to that product.
    """
    repository = ProductOptionRepository(session)

    option_update.id = item_id
    option_update.product_id = product_id

    try:
        repository.update_for_product(option_update)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="Product option not found")

    session.commit()
    logger.info("Updated option {} of product {}", item_id, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{item_id}", response_model=ProductOption)
def delete_product_option(
    product_id: str,
    item_id: str,
    session: Session = Depends(get_session),
) -> ProductOption:
    """Delete one option of a product."""
    repository = ProductOptionRepository(session)
    deleted = repository.delete_for_product(product_id, item_id)
    if deleted is None:
        raise HTTPException(status_code=404, detail="Product option not found")

    session.commit()
    logger.info("Deleted option {} of product {}", item_id, product_id)
    return deleted
