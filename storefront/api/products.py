"""
Product API endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.database import get_db
from storefront.services.product_service import ProductService
from storefront.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
    ExploreResponse
)

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency to get ProductService instance"""
    return ProductService(db)


@router.get("", response_model=ProductListResponse, summary="Get all products")
def get_products(
    skip: int = Query(0, ge=0, description="Number of products to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of products to return"),
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve all products, newest first, with pagination
    
    - **skip**: Number of products to skip (default: 0)
    - **limit**: Maximum number of products to return (default: 100, max: 1000)
    """
    return service.get_all_products(skip=skip, limit=limit)


@router.get("/search", response_model=ProductListResponse, summary="Search products")
def search_products(
    q: Optional[str] = Query(None, max_length=100, description="Text to match in name or description"),
    category: Optional[str] = Query(None, max_length=100, description="Only products of this category"),
    service: ProductService = Depends(get_product_service)
):
    """
    Case-insensitive search over product names and descriptions, newest first
    
    Without **q** or **category** every product is returned.
    """
    return service.search_products(q=q, category=category)


@router.get("/explore", response_model=ExploreResponse, summary="Get explore collection")
def get_explore_collection(service: ProductService = Depends(get_product_service)):
    """Products flagged for the explore page, grouped by category"""
    return service.get_explore_collection()


@router.get("/trending", response_model=ProductListResponse, summary="Get trending products")
def get_trending_products(
    limit: int = Query(10, ge=1, le=100, description="Maximum number of products to return"),
    service: ProductService = Depends(get_product_service)
):
    return service.get_trending_products(limit=limit)


@router.get("/{product_id}", response_model=ProductResponse, summary="Get product by ID")
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    return service.get_product_by_id(product_id)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    summary="Create product"
)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product (admin only)
    
    - **name**, **price**, **size** (S, M, L, XL), **category** are required
    - **images**: at least one; URL strings or {id, url} objects
    """
    return service.create_product(product_data)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
    summary="Update product"
)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Update an existing product (admin only)
    
    All fields are optional. Only provided fields will be updated.
    Orders placed earlier keep their captured prices.
    """
    return service.update_product(product_id, product_data)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
    summary="Delete product"
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    service.delete_product(product_id)
    return None


@router.delete(
    "/{product_id}/images/{image_id}",
    response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete product image"
)
def delete_product_image(
    product_id: int,
    image_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Remove a single image from a product (admin only)"""
    return service.delete_image(product_id, image_id)
