from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_product_service, get_raw_body
from app.schemas.http import HandlerResponse, ProductRequest
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


def _to_response(result: HandlerResponse) -> Response:
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a product from name, category, price and availability. "
                "The productId is assigned by the service."
)
def create_product(
    body: bytes = Depends(get_raw_body),
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**: Product name, non-empty string (required)
    - **category**: Product category, non-empty string (required)
    - **price**: Product price, any number (required)
    - **available**: Availability flag, boolean (required)

    Extra fields are stored and returned unchanged.
    """
    return _to_response(service.create_product(ProductRequest(body=body)))


@router.get(
    "",
    summary="List all products",
    description="Return every stored product in a single unordered array."
)
def list_products(service: ProductService = Depends(get_product_service)):
    """Get all products."""
    return _to_response(service.list_products(ProductRequest()))


@router.get(
    "/{product_id}",
    summary="Get product by ID",
    description="Get a single product by its productId."
)
def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID."""
    request = ProductRequest(path_parameters={"id": product_id})
    return _to_response(service.get_product(request))


@router.put(
    "/{product_id}",
    summary="Replace a product",
    description="Replace all fields of an existing product. Fields not present "
                "in the body are removed; the productId is taken from the path."
)
def update_product(
    product_id: str,
    body: bytes = Depends(get_raw_body),
    service: ProductService = Depends(get_product_service)
):
    """
    Update a product.

    The body must be a complete product. There is no partial update and no
    conflict detection between concurrent writers.
    """
    request = ProductRequest(body=body, path_parameters={"id": product_id})
    return _to_response(service.update_product(request))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    description="Delete a product by ID."
)
def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    request = ProductRequest(path_parameters={"id": product_id})
    return _to_response(service.delete_product(request))
