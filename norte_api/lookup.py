# norte_api/lookup.py
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import crud
from .errors import StoreFailure
from .models import Auto
from .slugs import normalize, extract_slug_token
from .utils import logger


class InventoryLookup:
    """Resolve a catalog slug to the auto it names.

    Names are not unique once normalized ("VW Gol" and "vw-gol" collide); the
    scan walks autos newest first, so the most recently created one wins.
    """

    def __init__(self, db: Session):
        self.db = db

    def resolve_by_slug(self, raw_slug: str) -> Optional[Auto]:
        wanted = normalize(extract_slug_token(raw_slug))
        if not wanted:
            return None
        try:
            autos = crud.list_autos(self.db)
        except SQLAlchemyError as e:
            raise StoreFailure(f"Could not load autos: {e}") from e
        for auto in autos:
            if normalize(auto.name) == wanted:
                return auto
        logger.info("No auto matches slug %r", wanted)
        return None
