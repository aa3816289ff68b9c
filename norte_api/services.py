# norte_api/services.py
from typing import Dict, Any
from . import schemas
from .utils import to_non_negative_int

# Write-side normalization: admin forms post strings, the store keeps
# integers. Price loses its fractional part on purpose.

def auto_values(payload: schemas.AutoIn, default_currency: str) -> Dict[str, Any]:
    return {
        "name": payload.name.strip(),
        "price": to_non_negative_int(payload.price),
        "currency": payload.currency or default_currency,
        "images": [u for u in (payload.images or []) if u],
        "engine": payload.engine,
        "transmission": payload.transmission,
        "year": to_non_negative_int(payload.year),
        "fuel": payload.fuel,
        "mileage": to_non_negative_int(payload.mileage),
        "description": payload.description,
        "color": payload.color,
        "reserved": bool(payload.reserved),
        "tag": payload.tag,
    }

def banner_values(payload: schemas.BannerIn) -> Dict[str, Any]:
    return {
        "image": payload.image,
        "title": payload.title,
        "link": payload.link,
        "position": to_non_negative_int(payload.position),
        "active": True if payload.active is None else payload.active,
    }

def price_guide_values(payload: schemas.PriceGuideIn, default_currency: str) -> Dict[str, Any]:
    return {
        "brand": payload.brand.strip(),
        "model": payload.model.strip(),
        "version": payload.version,
        "year": to_non_negative_int(payload.year),
        "price": to_non_negative_int(payload.price),
        "currency": payload.currency or default_currency,
    }
