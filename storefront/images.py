"""
Product image helpers

Images are stored as an ordered list of ``{"id": str, "url": str}`` objects.
Older records held a single path string or a list of path strings; those
shapes are converted here once, on write and by ``run_migrations.py``.
"""
import uuid
from typing import Any, Dict, List


def new_image_id() -> str:
    return uuid.uuid4().hex


def normalize_images(raw: Any) -> List[Dict[str, str]]:
    """
    Convert any supported image shape to the canonical list of {id, url}
    
    Accepts None, a single URL string, a single mapping, or a list mixing
    URL strings and mappings with a ``url`` key (``id`` optional).
    
    Raises:
        ValueError: If an entry has no URL or an unsupported type
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, (str, dict)) or hasattr(raw, "model_dump"):
        raw = [raw]
    
    images = []
    for entry in raw:
        if hasattr(entry, "model_dump"):
            entry = entry.model_dump()
        
        if isinstance(entry, str):
            url, image_id = entry, None
        elif isinstance(entry, dict):
            url, image_id = entry.get("url"), entry.get("id")
        else:
            raise ValueError(f"Unsupported image entry: {entry!r}")
        
        if not url or not str(url).strip():
            raise ValueError("Image url is required")
        
        images.append({
            "id": str(image_id) if image_id else new_image_id(),
            "url": str(url).strip()
        })
    return images


def resolve_image_url(url: str, base_url: str) -> str:
    """Prefix a stored relative path with the public media base URL"""
    if not base_url or url.startswith(("http://", "https://", "//")):
        return url
    return f"{base_url.rstrip('/')}/{url.lstrip('/')}"
