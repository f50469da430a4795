"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends

from src.catalog.api.http.deps import get_product_service
from src.catalog.core.services import ProductService
from src.catalog.entities.service.product import (
    ProductResponse,
    ProductSaveRequest,
    ProductUpdateRequest,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductResponse)
@router.post("/", response_model=ProductResponse, include_in_schema=False)
def create_product(
    request: ProductSaveRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a new product."""
    return service.create_product(request)


@router.get("", response_model=list[ProductResponse])
@router.get("/", response_model=list[ProductResponse], include_in_schema=False)
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """List all products in the order they were created."""
    return service.find_all()


@router.get("/{item_id}", response_model=ProductResponse)
def get_product(
    item_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Get a product by ID."""
    return service.find(item_id)


@router.patch("/{item_id}", response_model=ProductResponse)
def update_product(
    item_id: int,
    request: ProductUpdateRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Update a product's name and price."""
    return service.update_product(item_id, request)


@router.delete("/{item_id}")
def delete_product(
    item_id: int,
    service: ProductService = Depends(get_product_service),
) -> dict[str, str]:
    """Delete a product."""
    service.delete(item_id)
    return {"message": "Product deleted successfully"}
