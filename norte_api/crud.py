# norte_api/crud.py
"""CRUD operations for autos, banners and the price guide.

Single-statement inserts/updates/deletes; only `replace_price_guide` groups
several statements in one transaction. `increment_visits` runs the increment
inside the store so concurrent visits never lose updates.
"""
from sqlalchemy import update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Dict, Any, List, Optional
from .models import Auto, Banner, PriceGuideEntry


# --- autos ---

def list_autos(db: Session) -> List[Auto]:
    return db.query(Auto).order_by(Auto.id.desc()).all()

def get_auto(db: Session, auto_id: int):
    return db.query(Auto).filter(Auto.id == auto_id).first()

def create_auto(db: Session, values: Dict[str, Any]) -> Auto:
    obj = Auto(**values, visits=0)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj

def replace_auto(db: Session, auto_id: int, values: Dict[str, Any]):
    obj = get_auto(db, auto_id)
    if not obj:
        return None
    for k, v in values.items():
        setattr(obj, k, v)
    db.commit()
    db.refresh(obj)
    return obj

def delete_auto(db: Session, auto_id: int):
    obj = get_auto(db, auto_id)
    if not obj:
        return False
    db.delete(obj)
    db.commit()
    return True

def increment_visits(db: Session, auto_id: int) -> Optional[int]:
    """Add one visit and return the new counter, or None if the id is unknown."""
    stmt = (
        update(Auto)
        .where(Auto.id == auto_id)
        .values(visits=Auto.visits + 1)
        .returning(Auto.visits)
        .execution_options(synchronize_session=False)
    )
    visits = db.execute(stmt).scalar_one_or_none()
    db.commit()
    return visits


# --- banners ---

def list_banners(db: Session, only_active: bool = False) -> List[Banner]:
    q = db.query(Banner)
    if only_active:
        q = q.filter(Banner.active.is_(True))
    return q.order_by(Banner.position.asc(), Banner.id.asc()).all()

def create_banner(db: Session, values: Dict[str, Any]) -> Banner:
    obj = Banner(**values)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj

def update_banner(db: Session, banner_id: int, values: Dict[str, Any]):
    obj = db.query(Banner).filter(Banner.id == banner_id).first()
    if not obj:
        return None
    for k, v in values.items():
        setattr(obj, k, v)
    db.commit()
    db.refresh(obj)
    return obj

def delete_banner(db: Session, banner_id: int):
    obj = db.query(Banner).filter(Banner.id == banner_id).first()
    if not obj:
        return False
    db.delete(obj)
    db.commit()
    return True


# --- price guide ---

def list_price_guide(db: Session, filters: Dict = None) -> List[PriceGuideEntry]:
    q = db.query(PriceGuideEntry)
    if filters:
        if filters.get("brand"):
            q = q.filter(PriceGuideEntry.brand.ilike(f"%{filters['brand']}%"))
        if filters.get("model"):
            q = q.filter(PriceGuideEntry.model.ilike(f"%{filters['model']}%"))
        if filters.get("year") is not None:
            q = q.filter(PriceGuideEntry.year == filters["year"])
    return q.order_by(
        PriceGuideEntry.brand, PriceGuideEntry.model, PriceGuideEntry.year.desc(), PriceGuideEntry.id
    ).all()

def replace_price_guide(db: Session, rows: List[Dict[str, Any]]) -> int:
    """Swap the whole guide for `rows` atomically; the old guide survives a failure."""
    try:
        db.execute(delete(PriceGuideEntry))
        db.add_all([PriceGuideEntry(**r) for r in rows])
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return len(rows)

def delete_price_guide_entry(db: Session, entry_id: int):
    obj = db.query(PriceGuideEntry).filter(PriceGuideEntry.id == entry_id).first()
    if not obj:
        return False
    db.delete(obj)
    db.commit()
    return True
