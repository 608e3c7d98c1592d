#!/usr/bin/env python
"""
Script to run one-off data migrations for the Storefront API
"""
import logging

from storefront.database import SessionLocal, init_db
from storefront.migrations import normalize_catalog_images

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        normalize_catalog_images(db)
    finally:
        db.close()
