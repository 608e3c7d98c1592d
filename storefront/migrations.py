"""
One-off data migrations
"""
import logging

from sqlalchemy.orm import Session

from storefront.database import transaction
from storefront.images import normalize_images
from storefront.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def normalize_catalog_images(db: Session) -> int:
    """
    Rewrite every product's ``images`` into the list of {id, url} shape
    
    Products already in that shape keep their image IDs.
    
    Returns:
        Number of products changed
    """
    changed = 0
    with transaction(db):
        for product in ProductRepository(db).list_all():
            images = normalize_images(product.images)
            if images != product.images:
                product.images = images
                changed += 1
    logger.info("Normalized images of %s product(s)", changed)
    return changed
