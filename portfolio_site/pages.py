"""
Static page renderer.

Each ``*_page`` function is pure: it takes the injected ``SiteMetadata`` (and
the catalog where the page lists projects) and returns the template context.
Every context carries a ``meta`` payload ({title, description, url}) that
``templates/_seo.html`` turns into head / social-preview tags.

Routes in ``app.py`` only call these and hand the result to ``render_template``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .projects_data import ProjectRecord, is_external, iter_projects
from .site_metadata import SiteMetadata


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    url: str

    def as_dict(self) -> dict:
        return {"title": self.title, "description": self.description, "url": self.url}


# ---------------- about copy ----------------

ABOUT_HEADING = "About"

ABOUT_PARAGRAPHS = (
    "Hi, I'm a Software Engineering Graduate student at the University of Alberta. "
    "I like to blog about projects I'm working on, and things I'm learning. "
    "My interests include software development, AI/ML, and robotics.",
    "I am currently an incoming Master's student in Software Engineering & Intelligent "
    "Systems. I would like to find a technical role where I can learn more about "
    "software development practices.",
    "I have completed prior internships in industry and have been previously employed "
    "as a research assistant. Please visit my",
)

# the last paragraph is followed by this link text, then " to learn more."
PROFILE_LABEL = "linkedin"


# ---------------- helpers ----------------

def page_metadata(site: SiteMetadata, title: str, description: str, path: str) -> PageMetadata:
    """``"<title> - <author>"``, ``"<description> - <author>"``, ``site_url + path``."""
    return PageMetadata(
        title=f"{title} - {site.author}",
        description=f"{description} - {site.author}",
        url=f"{site.site_url}{path}",
    )


def project_cards(catalog: Iterable[ProjectRecord] | None = None) -> list[dict]:
    """Catalog -> card dicts, same order, strings untouched."""
    return [
        {
            "title": p.title,
            "description": p.description,
            "image_path": p.image_path,
            "link": p.link,
            "external": is_external(p.link),
        }
        for p in iter_projects(catalog)
    ]


# ---------------- pages ----------------

def about_page(site: SiteMetadata) -> dict:
    return {
        "meta": page_metadata(site, "About", "About me", "/about"),
        "heading": ABOUT_HEADING,
        "paragraphs": list(ABOUT_PARAGRAPHS),
        "profile_url": site.linkedin,
        "profile_label": PROFILE_LABEL,
    }


def projects_page(site: SiteMetadata, catalog: Iterable[ProjectRecord] | None = None) -> dict:
    return {
        "meta": page_metadata(site, "Projects", "My projects", "/projects"),
        "heading": "Projects",
        "intro": "Things I've built for classes, jobs, and fun.",
        "projects": project_cards(catalog),
    }


def home_page(site: SiteMetadata, catalog: Iterable[ProjectRecord] | None = None) -> dict:
    """Landing page; the root URL uses the bare site title, not a page suffix."""
    return {
        "meta": PageMetadata(title=site.title, description=site.description, url=site.site_url),
        "heading": site.title,
        "tagline": site.description,
        "projects": project_cards(catalog),
    }
