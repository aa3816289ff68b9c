# norte_api/api/routes.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional
from .. import crud, schemas, services
from ..config import Settings
from ..db import get_db
from ..lookup import InventoryLookup
from ..utils import logger
from .deps import get_settings, get_lookup

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok"}


# --- autos ---

@router.get("/api/autos", response_model=List[schemas.AutoOut])
def list_autos(db: Session = Depends(get_db)):
    return crud.list_autos(db)


@router.get("/api/autos/slug/{slug}", response_model=schemas.AutoOut)
def get_auto_by_slug(slug: str, lookup: InventoryLookup = Depends(get_lookup)):
    obj = lookup.resolve_by_slug(slug)
    if not obj:
        raise HTTPException(status_code=404, detail="Auto not found")
    return obj


@router.get("/api/autos/{auto_id}", response_model=schemas.AutoOut)
def get_auto(auto_id: int, db: Session = Depends(get_db)):
    obj = crud.get_auto(db, auto_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Auto not found")
    return obj


@router.post("/api/autos", response_model=schemas.AutoOut)
def create_auto(
    payload: schemas.AutoIn,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    obj = crud.create_auto(db, services.auto_values(payload, settings.DEFAULT_CURRENCY))
    logger.info("Created auto %s (%s)", obj.id, obj.name)
    return obj


@router.put("/api/autos/{auto_id}", response_model=schemas.AutoOut)
def replace_auto(
    auto_id: int,
    payload: schemas.AutoIn,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    obj = crud.replace_auto(db, auto_id, services.auto_values(payload, settings.DEFAULT_CURRENCY))
    if not obj:
        raise HTTPException(status_code=404, detail="Auto not found")
    return obj


@router.delete("/api/autos/{auto_id}")
def delete_auto(auto_id: int, db: Session = Depends(get_db)):
    ok = crud.delete_auto(db, auto_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Auto not found")
    logger.info("Deleted auto %s", auto_id)
    return {"status": "deleted"}


@router.patch("/api/autos/{auto_id}/visita", response_model=schemas.VisitOut)
def register_visit(auto_id: int, db: Session = Depends(get_db)):
    visits = crud.increment_visits(db, auto_id)
    if visits is None:
        raise HTTPException(status_code=404, detail="Auto not found")
    return schemas.VisitOut(id=auto_id, visits=visits)


# --- banners ---

@router.get("/api/banners", response_model=List[schemas.BannerOut])
def list_banners(activos: bool = False, db: Session = Depends(get_db)):
    return crud.list_banners(db, only_active=activos)


@router.post("/api/banners", response_model=schemas.BannerOut)
def create_banner(payload: schemas.BannerIn, db: Session = Depends(get_db)):
    return crud.create_banner(db, services.banner_values(payload))


@router.put("/api/banners/{banner_id}", response_model=schemas.BannerOut)
def update_banner(banner_id: int, payload: schemas.BannerIn, db: Session = Depends(get_db)):
    obj = crud.update_banner(db, banner_id, services.banner_values(payload))
    if not obj:
        raise HTTPException(status_code=404, detail="Banner not found")
    return obj


@router.delete("/api/banners/{banner_id}")
def delete_banner(banner_id: int, db: Session = Depends(get_db)):
    ok = crud.delete_banner(db, banner_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Banner not found")
    return {"status": "deleted"}


# --- price guide ---

@router.get("/api/precios", response_model=List[schemas.PriceGuideOut])
def list_price_guide(
    marca: Optional[str] = None,
    modelo: Optional[str] = None,
    anio: Optional[int] = None,
    db: Session = Depends(get_db),
):
    filters = {"brand": marca, "model": modelo, "year": anio}
    return crud.list_price_guide(db, filters=filters)


@router.post("/api/precios/bulk")
def load_price_guide(
    payload: schemas.PriceGuideBulkIn,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    rows = [services.price_guide_values(e, settings.DEFAULT_CURRENCY) for e in payload.entries]
    count = crud.replace_price_guide(db, rows)
    logger.info("Price guide replaced with %d entries", count)
    return {"count": count}


@router.delete("/api/precios/{entry_id}")
def delete_price_guide_entry(entry_id: int, db: Session = Depends(get_db)):
    ok = crud.delete_price_guide_entry(db, entry_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Price guide entry not found")
    return {"status": "deleted"}
