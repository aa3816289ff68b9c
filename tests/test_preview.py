# tests/test_preview.py
from types import SimpleNamespace

import pytest
from bs4 import BeautifulSoup

from norte_api.errors import AssetMissing, StoreFailure
from norte_api.preview import (
    Html,
    NotFoundFallback,
    PreviewRenderer,
    Redirect,
    StaticShell,
    build_preview_metadata,
    format_es_ar,
    inject_meta_tags,
    preview_image,
    standalone_page,
)

from conftest import BASE_URL, SHELL


def car(**overrides):
    fields = dict(
        id=7,
        name="Toyota Corolla XEI 2.0",
        price=1234567,
        currency="U$S",
        images=["http://res.cloudinary.com/norte/image/upload/v1/corolla.png"],
        engine="2.0 16v",
        year=2019,
        mileage=85000,
        visits=3,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def meta_content(html, **attrs):
    tag = BeautifulSoup(html, "html.parser").find("meta", attrs=attrs)
    return tag["content"] if tag else None


class StubLookup:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def resolve_by_slug(self, raw_slug):
        self.calls.append(raw_slug)
        if self.error:
            raise self.error
        return self.result


# --- metadata ---

def test_metadata_fields():
    meta = build_preview_metadata(car(), BASE_URL + "/")
    assert meta.title == "Toyota Corolla XEI 2.0 | Norte Automotores"
    assert meta.description == "U$S 1.234.567 - Año 2019 - 2.0 16v - 85.000 km."
    assert meta.url == "https://norte.example.com/auto/toyota-corolla-xei-20"
    assert meta.image == "https://res.cloudinary.com/norte/image/upload/f_jpg,q_auto,w_800/v1/corolla.png"


def test_zero_price_is_on_request():
    meta = build_preview_metadata(car(price=0), BASE_URL)
    assert "Consultar" in meta.description
    assert "U$S" not in meta.description


def test_price_is_rounded_half_up():
    assert "U$S 1.001 " in build_preview_metadata(car(price=1000.5), BASE_URL).description
    assert format_es_ar(999) == "999"
    assert format_es_ar(1000) == "1.000"


def test_missing_currency_uses_default():
    meta = build_preview_metadata(car(currency=None, price=9000), BASE_URL, default_currency="$")
    assert meta.description.startswith("$ 9.000")


def test_optional_parts_are_skipped():
    meta = build_preview_metadata(car(engine=None, mileage=None, year=None, price=0), BASE_URL)
    assert meta.description == "Consultar."


def test_image_transform():
    url = preview_image("http://cdn.example.com/upload/abc.png")
    assert url.startswith("https://")
    assert url == "https://cdn.example.com/upload/f_jpg,q_auto,w_800/abc.png"
    # applied once
    assert preview_image(url) == url


def test_image_without_cdn_segment_is_only_upgraded():
    assert preview_image("http://example.com/fotos/gol.jpg") == "https://example.com/fotos/gol.jpg"
    assert preview_image("//example.com/gol.jpg") == "https://example.com/gol.jpg"
    assert preview_image("https://example.com/upload/gol.jpg", width=1200) == \
        "https://example.com/upload/f_jpg,q_auto,w_1200/gol.jpg"


@pytest.mark.parametrize("images", [[], None, "not-a-list", [None]])
def test_no_images_gives_empty_image(images):
    assert build_preview_metadata(car(images=images), BASE_URL).image == ""


def test_malformed_record_does_not_raise():
    meta = build_preview_metadata(SimpleNamespace(), BASE_URL)
    assert meta.title == "Norte Automotores"
    assert meta.description == "Consultar."
    assert meta.image == ""
    assert meta.url == BASE_URL + "/auto/"


# --- html ---

def test_inject_replaces_shell_tags():
    html = inject_meta_tags(SHELL, build_preview_metadata(car(), BASE_URL))
    soup = BeautifulSoup(html, "html.parser")
    assert [t.string for t in soup.find_all("title")] == ["Toyota Corolla XEI 2.0 | Norte Automotores"]
    assert len(soup.find_all("meta", attrs={"name": "description"})) == 1
    assert meta_content(html, property="og:title") == "Toyota Corolla XEI 2.0 | Norte Automotores"
    assert meta_content(html, property="og:description").startswith("U$S 1.234.567")
    assert meta_content(html, property="og:type") == "website"
    assert meta_content(html, property="og:url") == BASE_URL + "/auto/toyota-corolla-xei-20"
    assert meta_content(html, property="og:image").startswith("https://")
    assert meta_content(html, name="twitter:card") == "summary_large_image"
    # the bundle itself is untouched
    assert soup.find("script", src="/assets/index.js") is not None
    assert soup.find("div", id="root") is not None
    assert soup.head.find("meta", charset="UTF-8") is not None


def test_inject_twice_keeps_one_set():
    meta = build_preview_metadata(car(), BASE_URL)
    html = inject_meta_tags(inject_meta_tags(SHELL, meta), meta)
    soup = BeautifulSoup(html, "html.parser")
    assert len(soup.find_all("title")) == 1
    assert len(soup.find_all("meta", property="og:title")) == 1


def test_inject_without_images_omits_og_image():
    html = inject_meta_tags(SHELL, build_preview_metadata(car(images=[]), BASE_URL))
    assert meta_content(html, property="og:image") is None
    assert meta_content(html, property="og:title") is not None


def test_inject_into_shell_without_head():
    html = inject_meta_tags("<html><body><div id='root'></div></body></html>", build_preview_metadata(car(), BASE_URL))
    soup = BeautifulSoup(html, "html.parser")
    assert soup.head.title.string.startswith("Toyota Corolla")


def test_markup_in_names_is_escaped():
    meta = build_preview_metadata(car(name='Fiat "Uno" <Way>'), BASE_URL)
    html = inject_meta_tags(SHELL, meta)
    assert "<Way>" not in html
    assert meta_content(html, property="og:title") == 'Fiat "Uno" <Way> | Norte Automotores'


def test_standalone_page_redirects_to_canonical_route():
    meta = build_preview_metadata(car(), BASE_URL)
    html = standalone_page(meta)
    soup = BeautifulSoup(html, "html.parser")
    assert meta_content(html, property="og:url") == meta.url
    assert soup.find("meta", attrs={"http-equiv": "refresh"})["content"] == f"0; url={meta.url}"
    assert f'window.location.replace("{meta.url}")' in soup.find("script").string
    assert soup.find("a")["href"] == meta.url


# --- renderer ---

def make_renderer(static_dir, lookup):
    return PreviewRenderer(lookup, StaticShell(static_dir), BASE_URL)


def test_render_found_injects_into_shell(static_dir):
    lookup = StubLookup(result=car())
    rendered = make_renderer(static_dir, lookup).render("toyota-corolla-xei-20")
    assert isinstance(rendered, Html)
    assert meta_content(rendered.body, property="og:url") == BASE_URL + "/auto/toyota-corolla-xei-20"
    assert lookup.calls == ["toyota-corolla-xei-20"]


def test_render_does_not_count_a_visit(static_dir):
    record = car(visits=3)
    make_renderer(static_dir, StubLookup(result=record)).render("x")
    assert record.visits == 3


def test_render_not_found_falls_back(static_dir):
    assert isinstance(make_renderer(static_dir, StubLookup()).render("nonexistent-car"), NotFoundFallback)


def test_render_store_failure_falls_back(static_dir):
    renderer = make_renderer(static_dir, StubLookup(error=StoreFailure("down")))
    assert isinstance(renderer.render("vw-gol"), NotFoundFallback)
    assert renderer.render_share("vw-gol") == Redirect(BASE_URL + "/")


def test_render_share(static_dir):
    renderer = make_renderer(static_dir, StubLookup(result=car()))
    rendered = renderer.render_share("toyota-corolla-xei-20")
    assert isinstance(rendered, Html)
    assert "http-equiv" in rendered.body
    assert make_renderer(static_dir, StubLookup()).render_share("nope") == Redirect(BASE_URL + "/")


def test_render_missing_shell_raises(tmp_path):
    renderer = make_renderer(tmp_path / "empty", StubLookup(result=car()))
    with pytest.raises(AssetMissing):
        renderer.render("toyota-corolla-xei-20")
