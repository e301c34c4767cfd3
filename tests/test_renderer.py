import pytest

from portfolio_site.pages import (
    ABOUT_PARAGRAPHS,
    PageMetadata,
    about_page,
    home_page,
    page_metadata,
    projects_page,
)
from portfolio_site.site_metadata import SiteMetadata

@pytest.fixture
def site(site_cfg):
    return SiteMetadata.from_mapping(site_cfg)

@pytest.mark.renderer
def test_about_metadata_payload_exact(site):
    ctx = about_page(site)
    assert ctx["meta"].as_dict() == {
        "title": "About - X",
        "description": "About me - X",
        "url": "https://example.com/about",
    }

@pytest.mark.renderer
def test_about_body_is_fixed(site):
    ctx = about_page(site)
    assert ctx["heading"] == "About"
    assert ctx["paragraphs"] == list(ABOUT_PARAGRAPHS)
    assert ctx["profile_url"] == "https://www.linkedin.com/in/jyotirsai/"
    # pure: same input, same output
    assert about_page(site) == ctx

@pytest.mark.renderer
def test_page_metadata_composes_from_site():
    site = SiteMetadata(author="Ada", site_url="https://ada.dev")
    assert page_metadata(site, "Notes", "My notes", "/notes") == PageMetadata(
        title="Notes - Ada", description="My notes - Ada", url="https://ada.dev/notes",
    )

@pytest.mark.renderer
def test_projects_page_keeps_order_and_links(site, catalog):
    ctx = projects_page(site, catalog)
    assert [c["title"] for c in ctx["projects"]] == ["A", "B"]
    assert ctx["projects"][0]["link"] == "https://github.com/example/a"
    assert ctx["projects"][0]["external"] is True
    assert ctx["projects"][1]["link"] == "/blog//sorting-visualizer"
    assert ctx["projects"][1]["external"] is False
    assert ctx["meta"].url == "https://example.com/projects"

@pytest.mark.renderer
def test_home_page_uses_site_title(site, catalog):
    ctx = home_page(site, catalog)
    assert ctx["meta"].url == "https://example.com"
    assert ctx["heading"] == site.title
    assert len(ctx["projects"]) == 2

@pytest.mark.renderer
def test_site_metadata_requires_author_and_url():
    with pytest.raises(KeyError):
        SiteMetadata.from_mapping({"siteUrl": "https://example.com"})
    with pytest.raises(KeyError):
        SiteMetadata.from_mapping({"author": "X"})
    assert SiteMetadata.from_mapping({"author": "X", "site_url": "https://x.io"}).site_url == "https://x.io"

@pytest.mark.renderer
def test_site_metadata_from_env(monkeypatch):
    monkeypatch.setenv("SITE_AUTHOR", "Env Author")
    monkeypatch.setenv("SITE_URL", "https://env.example")
    site = SiteMetadata.from_env()
    assert site.author == "Env Author"
    assert site.site_url == "https://env.example"
