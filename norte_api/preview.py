# norte_api/preview.py
"""Link previews for shared catalog listings.

Chat apps and social networks fetch a shared ``/auto/<slug>`` URL once and
read its Open Graph / Twitter Card tags without running any JavaScript. This
module turns one auto into those tags and produces the page the crawler gets:

- `PreviewRenderer.render` injects the tags into the client shell
  (``index.html`` of the bundle) so people following the link land in the app.
- `PreviewRenderer.render_share` emits a small standalone page carrying the
  tags plus a redirect to the canonical ``/auto/<slug>`` route.

Crawlers always get a renderable page: an unknown slug or a store failure
falls back to the bare shell (or a redirect to the site root). Only a missing
shell is surfaced, as `AssetMissing`.
"""
import json
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup

from .errors import AssetMissing, StoreFailure
from .lookup import InventoryLookup
from .slugs import normalize
from .utils import logger

PARSER = "html.parser"
CDN_UPLOAD_SEGMENT = "/upload/"
PRICE_ON_REQUEST = "Consultar"

_STANDALONE_TEMPLATE = (
    '<!DOCTYPE html><html lang="es"><head><meta charset="utf-8"/>'
    '<meta name="viewport" content="width=device-width, initial-scale=1"/>'
    "</head><body></body></html>"
)


@dataclass
class PreviewMetadata:
    title: str
    description: str
    image: str
    url: str


@dataclass
class Redirect:
    location: str


@dataclass
class Html:
    body: str


@dataclass
class NotFoundFallback:
    """Serve the client shell untouched and let the client router decide."""


RenderedResponse = Union[Redirect, Html, NotFoundFallback]


# --- metadata ---

def _rounded(value) -> int:
    try:
        return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError):
        return 0


def format_es_ar(number) -> str:
    """Group thousands with dots, as es-AR does: 1234567 -> '1.234.567'."""
    return f"{_rounded(number):,}".replace(",", ".")


def price_text(price, currency: str) -> str:
    if not _rounded(price or 0):
        return PRICE_ON_REQUEST
    return f"{currency} {format_es_ar(price)}".strip()


def preview_image(url, width: int = 800) -> str:
    """Make an image URL crawler friendly.

    Upgrades to https and, for CDN uploads, asks the CDN for a ``width``
    pixel JPEG since several crawlers drop WebP/AVIF and large images.
    """
    if not url or not isinstance(url, str):
        return ""
    url = url.strip()
    if url.startswith("http://"):
        url = "https://" + url[len("http://"):]
    elif url.startswith("//"):
        url = "https:" + url
    transform = f"f_jpg,q_auto,w_{width}/"
    if CDN_UPLOAD_SEGMENT in url and CDN_UPLOAD_SEGMENT + "f_jpg" not in url:
        url = url.replace(CDN_UPLOAD_SEGMENT, CDN_UPLOAD_SEGMENT + transform, 1)
    return url


def build_preview_metadata(
    auto,
    base_url: str,
    site_name: str = "Norte Automotores",
    image_width: int = 800,
    default_currency: str = "U$S",
) -> PreviewMetadata:
    name = getattr(auto, "name", None) or ""
    currency = getattr(auto, "currency", None) or default_currency

    parts = [price_text(getattr(auto, "price", None), currency)]
    year = getattr(auto, "year", None)
    if year:
        parts.append(f"Año {year}")
    engine = getattr(auto, "engine", None)
    if engine:
        parts.append(str(engine))
    mileage = getattr(auto, "mileage", None)
    if mileage is not None:
        parts.append(f"{format_es_ar(mileage)} km")

    images = getattr(auto, "images", None)
    first_image = images[0] if isinstance(images, (list, tuple)) and images else ""

    return PreviewMetadata(
        title=f"{name} | {site_name}" if name else site_name,
        description=" - ".join(parts) + ".",
        image=preview_image(first_image, image_width),
        url=f"{base_url.rstrip('/')}/auto/{normalize(name)}",
    )


# --- html ---

def _js_string(value: str) -> str:
    return json.dumps(value).replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def _is_preview_tag(tag) -> bool:
    if tag.name == "title":
        return True
    if tag.name != "meta":
        return False
    name = tag.get("name") or ""
    prop = tag.get("property") or ""
    return name == "description" or name.startswith("twitter:") or prop.startswith("og:")


def meta_tags(soup: BeautifulSoup, meta: PreviewMetadata):
    title = soup.new_tag("title")
    title.string = meta.title
    tags = [title]
    attrs = [
        {"name": "description", "content": meta.description},
        {"property": "og:title", "content": meta.title},
        {"property": "og:description", "content": meta.description},
    ]
    if meta.image:
        attrs.append({"property": "og:image", "content": meta.image})
    attrs += [
        {"property": "og:type", "content": "website"},
        {"property": "og:url", "content": meta.url},
        {"name": "twitter:card", "content": "summary_large_image"},
    ]
    if meta.image:
        attrs.append({"name": "twitter:image", "content": meta.image})
    tags += [soup.new_tag("meta", attrs=a) for a in attrs]
    return tags


def inject_meta_tags(shell_html: str, meta: PreviewMetadata) -> str:
    """Put the preview tags at the end of the shell's <head>.

    Tags the shell already carries (its <title>, description, og:*, twitter:*)
    are dropped first, so injecting twice yields one set of tags.
    """
    soup = BeautifulSoup(shell_html, PARSER)
    head = soup.head
    if head is None:
        head = soup.new_tag("head")
        if soup.html is not None:
            soup.html.insert(0, head)
        else:
            soup.insert(0, head)
    for tag in head.find_all(_is_preview_tag):
        tag.decompose()
    for tag in meta_tags(soup, meta):
        head.append(tag)
    return str(soup)


def standalone_page(meta: PreviewMetadata) -> str:
    soup = BeautifulSoup(_STANDALONE_TEMPLATE, PARSER)
    for tag in meta_tags(soup, meta):
        soup.head.append(tag)
    soup.head.append(soup.new_tag("meta", attrs={"http-equiv": "refresh", "content": f"0; url={meta.url}"}))

    script = soup.new_tag("script")
    script.string = f"window.location.replace({_js_string(meta.url)});"
    link = soup.new_tag("a", attrs={"href": meta.url})
    link.string = meta.title
    soup.body.append(script)
    soup.body.append(link)
    return str(soup)


# --- rendering ---

class StaticShell:
    """The bundle's ``index.html``; read on every request, never cached."""

    def __init__(self, static_dir):
        self.path = Path(static_dir) / "index.html"

    def read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise AssetMissing(self.path) from e


class PreviewRenderer:
    def __init__(
        self,
        lookup: InventoryLookup,
        shell: StaticShell,
        base_url: str,
        site_name: str = "Norte Automotores",
        image_width: int = 800,
        default_currency: str = "U$S",
    ):
        self.lookup = lookup
        self.shell = shell
        self.base_url = base_url.rstrip("/")
        self.site_name = site_name
        self.image_width = image_width
        self.default_currency = default_currency

    def metadata_for(self, raw_slug: str) -> Optional[PreviewMetadata]:
        try:
            auto = self.lookup.resolve_by_slug(raw_slug)
        except StoreFailure:
            logger.exception("Preview lookup failed for slug %r", raw_slug)
            return None
        if auto is None:
            return None
        return build_preview_metadata(
            auto,
            self.base_url,
            site_name=self.site_name,
            image_width=self.image_width,
            default_currency=self.default_currency,
        )

    def render(self, raw_slug: str) -> RenderedResponse:
        meta = self.metadata_for(raw_slug)
        if meta is None:
            return NotFoundFallback()
        return Html(inject_meta_tags(self.shell.read(), meta))

    def render_share(self, raw_slug: str) -> RenderedResponse:
        meta = self.metadata_for(raw_slug)
        if meta is None:
            return Redirect(f"{self.base_url}/")
        return Html(standalone_page(meta))
