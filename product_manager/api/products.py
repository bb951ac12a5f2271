"""FastAPI routes for product CRUD over JSON."""

from fastapi import APIRouter, HTTPException, Request, Response, status

from product_manager.dependencies import ProductServiceDep
from product_manager.models.product import Product
from product_manager.schemas import ProductCreate, ProductResponse, ProductUpdate

router = APIRouter(prefix="/api/products", tags=["products"])


def product_not_found(product_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Product with ID '{product_id}' not found",
    )


@router.get("", response_model=list[ProductResponse])
async def get_products(service: ProductServiceDep) -> list[ProductResponse]:
    """List every product in the catalog.

    An empty catalog yields an empty list.
    """
    products = await service.get_all()
    return [ProductResponse.model_validate(product) for product in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, service: ProductServiceDep) -> ProductResponse:
    """Get a single product by ID.

    Raises:
        HTTPException: 404 if no product has this ID.
    """
    product = await service.get_by_id(product_id)
    if product is None:
        raise product_not_found(product_id)

    return ProductResponse.model_validate(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    service: ProductServiceDep,
) -> ProductResponse:
    """Create a product.

    Field validation happens before this handler runs; failures are
    answered with 400 and per-field messages. On success the Location
    header points at the new resource.
    """
    created = await service.add(Product(**payload.model_dump()))

    response.headers["Location"] = str(
        request.url_for("get_product", product_id=created.id)
    )
    return ProductResponse.model_validate(created)


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductServiceDep,
) -> None:
    """Replace the business fields of an existing product.

    Raises:
        HTTPException: 400 if the path ID and body ID differ.
        HTTPException: 404 if no product has this ID.
    """
    if payload.id != product_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="ID mismatch",
        )

    if not await service.exists(product_id):
        raise product_not_found(product_id)

    await service.update(Product(**payload.model_dump()))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, service: ProductServiceDep) -> None:
    """Delete a product.

    Raises:
        HTTPException: 404 if no product has this ID.
    """
    if not await service.exists(product_id):
        raise product_not_found(product_id)

    await service.delete(product_id)
