import os, sys
import pytest
from bs4 import BeautifulSoup
# Ensure repo root is on sys.path so "portfolio_site" imports work without an install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from portfolio_site.projects_data import ProjectRecord


@pytest.fixture
def site_cfg():
    return {"author": "X", "siteUrl": "https://example.com"}


@pytest.fixture
def catalog():
    # includes an external URL and the historical doubled-separator route
    return (
        ProjectRecord("A", "First project.", "/static/images/a.png", "https://github.com/example/a"),
        ProjectRecord("B", "Second project.", "/static/images/b.png", "/blog//sorting-visualizer"),
    )


@pytest.fixture
def app(site_cfg, catalog):
    from portfolio_site.app import create_app

    cfg = {
        "TESTING": True,
        "SITE_METADATA": site_cfg,
        "PROJECTS": catalog,
    }
    return create_app(cfg)

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def soup():
    def _s(html: bytes | str):
        return BeautifulSoup(html, "lxml")
    return _s
