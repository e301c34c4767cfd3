"""
Site-wide configuration (author, base URL, social links).

Pages never read these values from a module global: the app factory builds a
``SiteMetadata`` once and hands it to every renderer call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping


DEFAULT_AUTHOR = "Jyotir Sai"
DEFAULT_SITE_URL = "https://jyotirsai.com"
DEFAULT_TITLE = "Jyotir Sai"
DEFAULT_DESCRIPTION = "Software engineering, AI/ML and robotics projects and notes."
DEFAULT_LINKEDIN = "https://www.linkedin.com/in/jyotirsai/"


@dataclass(frozen=True)
class SiteMetadata:
    author: str
    site_url: str
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    linkedin: str = DEFAULT_LINKEDIN
    locale: str = "en-US"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SiteMetadata":
        """
        Build from a plain dict.

        ``author`` and the site URL (``site_url`` or ``siteUrl``) are required;
        a missing one raises ``KeyError`` so a bad config fails at startup.
        """
        if "site_url" in data:
            site_url = data["site_url"]
        else:
            site_url = data["siteUrl"]
        return cls(
            author=data["author"],
            site_url=site_url,
            title=data.get("title", DEFAULT_TITLE),
            description=data.get("description", DEFAULT_DESCRIPTION),
            linkedin=data.get("linkedin", DEFAULT_LINKEDIN),
            locale=data.get("locale", "en-US"),
        )

    @classmethod
    def from_env(cls) -> "SiteMetadata":
        """Read SITE_* environment variables, falling back to the defaults."""
        return cls(
            author=os.getenv("SITE_AUTHOR", DEFAULT_AUTHOR),
            site_url=os.getenv("SITE_URL", DEFAULT_SITE_URL),
            title=os.getenv("SITE_TITLE", DEFAULT_TITLE),
            description=os.getenv("SITE_DESCRIPTION", DEFAULT_DESCRIPTION),
            linkedin=os.getenv("SITE_LINKEDIN", DEFAULT_LINKEDIN),
        )
