"""
Pydantic schemas for product request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict, ValidationInfo, field_validator
from typing import Any, List, Literal, Optional
from datetime import datetime

from storefront.images import normalize_images, resolve_image_url


ProductSize = Literal['S', 'M', 'L', 'XL']


class ProductImage(BaseModel):
    """Single addressable product image"""
    id: str
    url: str
    
    model_config = ConfigDict(from_attributes=True)


class ProductImagesMixin(BaseModel):
    """Resolves relative image paths against ``media_base_url`` from the validation context"""
    images: List[ProductImage] = Field(default_factory=list)
    
    @field_validator("images", mode="after")
    @classmethod
    def resolve_urls(cls, images: List[ProductImage], info: ValidationInfo) -> List[ProductImage]:
        base_url = (info.context or {}).get("media_base_url")
        if not base_url:
            return images
        return [
            image.model_copy(update={"url": resolve_image_url(image.url, base_url)})
            for image in images
        ]


class ProductBase(BaseModel):
    """Base Product schema with common fields"""
    name: str = Field(..., min_length=1, max_length=100, description="Product name")
    description: Optional[str] = Field(None, max_length=500, description="Product description")
    price: float = Field(..., ge=0, description="Product price (must be non-negative)")
    size: ProductSize = Field(..., description="Product size")
    category: str = Field(..., min_length=1, max_length=100, description="Product category")
    is_explore: bool = False
    is_trending: bool = False
    offer_strip: Optional[str] = Field(None, max_length=200)


class ProductCreate(ProductBase):
    """Schema for creating a new product"""
    images: List[ProductImage] = Field(..., min_length=1, description="At least one image")
    
    @field_validator("images", mode="before")
    @classmethod
    def normalize(cls, value: Any) -> List[dict]:
        return normalize_images(value)


class ProductUpdate(BaseModel):
    """Schema for updating a product (all fields optional)"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: Optional[float] = Field(None, ge=0)
    size: Optional[ProductSize] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    images: Optional[List[ProductImage]] = Field(None, min_length=1)
    is_explore: Optional[bool] = None
    is_trending: Optional[bool] = None
    offer_strip: Optional[str] = Field(None, max_length=200)
    
    @field_validator("images", mode="before")
    @classmethod
    def normalize(cls, value: Any) -> Optional[List[dict]]:
        if value is None:
            return None
        return normalize_images(value)


class ProductResponse(ProductImagesMixin, ProductBase):
    """Schema for product response"""
    id: int
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class ProductSummary(ProductImagesMixin):
    """Product fields embedded in order responses"""
    id: int
    name: str
    price: float
    
    model_config = ConfigDict(from_attributes=True)


class ProductListResponse(BaseModel):
    """Schema for list of products response"""
    products: list[ProductResponse]
    total: int


class ExploreResponse(BaseModel):
    """Explore collection grouped by category"""
    categories: dict[str, list[ProductResponse]]
    count: int
