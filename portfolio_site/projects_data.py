# portfolio_site/projects_data.py
"""Project catalog shown on the Projects page (data only, edit + redeploy to change)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class ProjectRecord:
    title: str
    description: str
    image_path: str
    link: str

    def to_json(self) -> dict:
        """Same keys the original JS data file used (imgSrc / href)."""
        return {
            "title": self.title,
            "description": self.description,
            "imgSrc": self.image_path,
            "href": self.link,
        }


# Order here is display order.
PROJECTS: Sequence[ProjectRecord] = (
    ProjectRecord(
        title="Gearbox Design",
        description=(
            "Designed a 5-speed manual transmission for a Mechanical Design "
            "class in a team of 6."
        ),
        image_path="/static/images/gearbox-render.png",
        link="/blog/gearbox-design",
    ),
    ProjectRecord(
        title="Aim Duel",
        description="HTML Canvas game made using JavaScript, Express, socket.io, and Webpack",
        image_path="/static/images/aimduel-mainmenu.png",
        link="/blog/browser-game",
    ),
)


def iter_projects(catalog: Iterable[ProjectRecord] | None = None) -> Iterator[ProjectRecord]:
    """Yield records in declaration order. No filtering or sorting."""
    yield from (PROJECTS if catalog is None else catalog)


def is_external(link: str) -> bool:
    # absolute URLs open outside the site; the link itself is never rewritten
    return link.startswith("http")

