"""
Portfolio site Flask app.

Goals:
- Factory: create_app(config=None)
- Routes:
    GET /               -> home.html (site title + featured projects)
    GET /about          -> about.html (bio + LinkedIn link)
    GET /projects       -> projects.html (catalog cards, declaration order)
    GET /projects.json  -> catalog as JSON (title, description, imgSrc, href)
- Dependency Injection via app.config: SITE_METADATA, PROJECTS
- Every page context carries `meta` ({title, description, url}) for _seo.html
"""

from __future__ import annotations

from typing import Any, Mapping

from flask import Flask, jsonify, render_template

from .pages import about_page, home_page, projects_page
from .projects_data import PROJECTS, iter_projects
from .site_metadata import SiteMetadata


# ---------------- helpers ----------------

def _site(app: Flask) -> SiteMetadata:
    """Accept either a SiteMetadata or a plain dict in SITE_METADATA."""
    site = app.config["SITE_METADATA"]
    if isinstance(site, Mapping):
        site = SiteMetadata.from_mapping(site)
        app.config["SITE_METADATA"] = site
    return site


# --------------- factory ---------------

def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.update(
        TESTING=False,
        # DI hooks (tests or prod can provide these):
        SITE_METADATA=SiteMetadata.from_env(),  # SiteMetadata or {"author", "siteUrl", ...}
        PROJECTS=PROJECTS,                      # Sequence[ProjectRecord]
    )
    if config:
        app.config.update(config)

    # normalise once so a bad config fails here, not on the first request
    site = _site(app)
    app.logger.info(
        "portfolio site for %s at %s (%d projects)",
        site.author,
        site.site_url,
        len(app.config["PROJECTS"]),
    )

    # --------------- routes ---------------

    @app.get("/")
    def home():
        ctx = home_page(_site(app), app.config["PROJECTS"])
        return render_template("home.html", active="home", **ctx)

    @app.get("/about")
    def about():
        ctx = about_page(_site(app))
        return render_template("about.html", active="about", **ctx)

    @app.get("/projects")
    def projects():
        ctx = projects_page(_site(app), app.config["PROJECTS"])
        return render_template("projects.html", active="projects", **ctx)

    @app.get("/projects.json")
    def projects_json():
        """Catalog in the original data-file shape, declaration order."""
        rows: list[dict[str, Any]] = [p.to_json() for p in iter_projects(app.config["PROJECTS"])]
        return jsonify(rows), 200

    return app
