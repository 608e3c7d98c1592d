"""
Product Service - Business Logic Layer
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.models.product import Product
from storefront.repositories.product_repository import ProductRepository
from storefront.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
    ExploreResponse
)
from storefront.services.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class ProductService:
    """Service layer for catalog business logic"""
    
    def __init__(self, db: Session, media_base_url: Optional[str] = None):
        self.repository = ProductRepository(db)
        self.media_base_url = settings.MEDIA_BASE_URL if media_base_url is None else media_base_url
    
    def _to_response(self, product: Product) -> ProductResponse:
        return ProductResponse.model_validate(
            product,
            context={"media_base_url": self.media_base_url}
        )
    
    def _get_or_404(self, product_id: int) -> Product:
        product = self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError(f"Product with id={product_id} not found")
        return product
    
    def get_all_products(self, skip: int = 0, limit: int = 100) -> ProductListResponse:
        """Get all products with pagination"""
        products = self.repository.get_all(skip=skip, limit=limit)
        total = self.repository.count()
        
        return ProductListResponse(
            products=[self._to_response(p) for p in products],
            total=total
        )
    
    def search_products(self, q: Optional[str] = None, category: Optional[str] = None) -> ProductListResponse:
        """Search by name or description, optionally within one category"""
        q = q.strip() if q else None
        products = self.repository.search(q=q, category=category)
        return ProductListResponse(
            products=[self._to_response(p) for p in products],
            total=len(products)
        )
    
    def get_explore_collection(self) -> ExploreResponse:
        """Explore products grouped by category, newest first within each"""
        grouped = {}
        products = self.repository.get_explore()
        for product in products:
            grouped.setdefault(product.category, []).append(self._to_response(product))
        return ExploreResponse(categories=grouped, count=len(products))
    
    def get_trending_products(self, limit: int = 10) -> ProductListResponse:
        """Most recent trending products"""
        products = self.repository.get_trending(limit=limit)
        return ProductListResponse(
            products=[self._to_response(p) for p in products],
            total=len(products)
        )
    
    def get_product_by_id(self, product_id: int) -> ProductResponse:
        """Get product by ID"""
        return self._to_response(self._get_or_404(product_id))
    
    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """Create new product"""
        product = self.repository.create(product_data.model_dump())
        logger.info("Product created: %s", product.id)
        return self._to_response(product)
    
    def update_product(self, product_id: int, product_data: ProductUpdate) -> ProductResponse:
        """
        Update existing product
        
        Existing orders keep the unit price they captured; only the catalog
        entry changes.
        """
        product = self._get_or_404(product_id)
        update_data = product_data.model_dump(exclude_unset=True)
        
        # Explicit nulls for required columns are ignored
        update_data = {
            field: value for field, value in update_data.items()
            if value is not None or field in ("description", "offer_strip")
        }
        product = self.repository.update(product, update_data)
        return self._to_response(product)
    
    def delete_product(self, product_id: int) -> None:
        """
        Delete product
        
        Raises:
            NotFoundError: If the product does not exist
            BadRequestError: If existing orders still reference it
        """
        product = self._get_or_404(product_id)
        try:
            self.repository.delete(product)
        except IntegrityError:
            self.repository.db.rollback()
            logger.warning("Refused to delete product %s referenced by orders", product_id)
            raise BadRequestError(f"Product with id={product_id} is referenced by existing orders")
        logger.info("Product deleted: %s", product_id)
    
    def delete_image(self, product_id: int, image_id: str) -> ProductResponse:
        """
        Remove one image from a product by its image ID
        
        Raises:
            NotFoundError: Unknown product or image
            BadRequestError: If it is the product's only image
        """
        product = self._get_or_404(product_id)
        images = list(product.images or [])
        remaining = [image for image in images if image.get("id") != image_id]
        
        if len(remaining) == len(images):
            raise NotFoundError(f"Image with id={image_id} not found")
        if not remaining:
            raise BadRequestError("At least one image is required")
        
        product = self.repository.update(product, {"images": remaining})
        return self._to_response(product)
