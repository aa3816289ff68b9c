# norte_api/api/deps.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ..config import Settings
from ..db import get_db
from ..lookup import InventoryLookup
from ..preview import PreviewRenderer, StaticShell


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_shell(settings: Settings = Depends(get_settings)) -> StaticShell:
    return StaticShell(settings.STATIC_DIR)


def get_lookup(db: Session = Depends(get_db)) -> InventoryLookup:
    return InventoryLookup(db)


def public_base_url(request: Request, settings: Settings) -> str:
    # fall back to the host the request came in on
    return (settings.PUBLIC_BASE_URL or str(request.base_url)).rstrip("/")


def get_renderer(
    request: Request,
    lookup: InventoryLookup = Depends(get_lookup),
    shell: StaticShell = Depends(get_shell),
    settings: Settings = Depends(get_settings),
) -> PreviewRenderer:
    return PreviewRenderer(
        lookup,
        shell,
        public_base_url(request, settings),
        site_name=settings.SITE_NAME,
        image_width=settings.PREVIEW_IMAGE_WIDTH,
        default_currency=settings.DEFAULT_CURRENCY,
    )
