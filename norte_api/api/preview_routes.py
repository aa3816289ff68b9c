# norte_api/api/preview_routes.py
"""Pages for shared links and the client bundle.

Registered last: the catch-all GET serves bundle files and falls back to the
client shell so the client router can handle deep links.
"""
from pathlib import Path
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse

from ..config import Settings
from ..preview import Html, PreviewRenderer, Redirect, RenderedResponse, StaticShell
from .deps import get_renderer, get_settings, get_shell

router = APIRouter()


def to_response(rendered: RenderedResponse, shell: StaticShell):
    if isinstance(rendered, Redirect):
        return RedirectResponse(rendered.location, status_code=302)
    if isinstance(rendered, Html):
        return HTMLResponse(rendered.body)
    return HTMLResponse(shell.read())


@router.api_route("/auto/{slug}", methods=["GET", "HEAD"], response_class=HTMLResponse)
def auto_preview(
    slug: str,
    renderer: PreviewRenderer = Depends(get_renderer),
    shell: StaticShell = Depends(get_shell),
):
    return to_response(renderer.render(slug), shell)


@router.api_route("/share/auto/{slug}", methods=["GET", "HEAD"], response_class=HTMLResponse)
def auto_share_page(
    slug: str,
    renderer: PreviewRenderer = Depends(get_renderer),
    shell: StaticShell = Depends(get_shell),
):
    return to_response(renderer.render_share(slug), shell)


@router.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
def client_bundle(
    full_path: str,
    shell: StaticShell = Depends(get_shell),
    settings: Settings = Depends(get_settings),
):
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not found")
    if full_path:
        root = Path(settings.STATIC_DIR).resolve()
        candidate = (root / full_path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)
    return HTMLResponse(shell.read())
