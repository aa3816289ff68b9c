# tests/conftest.py
import os
import pytest

# norte_api.main builds a module-level app on import
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient
from norte_api import crud, schemas, services
from norte_api.config import Settings
from norte_api.db import Base, create_db_engine, create_session_factory
from norte_api.main import create_app

SHELL = """<!DOCTYPE html>
<html lang="es">
<head>
<meta charset="UTF-8" />
<title>Norte Automotores</title>
<meta name="description" content="Autos usados en Salta" />
<script type="module" crossorigin src="/assets/index.js"></script>
</head>
<body><div id="root"></div></body>
</html>
"""

BASE_URL = "https://norte.example.com"


@pytest.fixture
def static_dir(tmp_path):
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text(SHELL, encoding="utf-8")
    (dist / "assets" / "index.js").write_text("console.log('catalogo');", encoding="utf-8")
    return dist


@pytest.fixture
def settings(tmp_path, static_dir):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'norte.db'}",
        STATIC_DIR=str(static_dir),
        PUBLIC_BASE_URL=BASE_URL,
    )


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def app(settings, engine):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def add_auto(db, name, **fields):
    payload = schemas.AutoIn(nombre=name, **fields)
    return crud.create_auto(db, services.auto_values(payload, "U$S"))
