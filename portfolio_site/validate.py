"""
Project catalog validator.

Run before deploying to catch content mistakes in projects_data.py:
  • every record has title, description, image_path and link
  • each of those is a non-empty string

Links and image paths are NOT checked for existence or normalised (a doubled
separator like ``/blog//post`` passes).

Usage:
    python -m portfolio_site.validate
"""

from __future__ import annotations

from typing import Iterable

from .projects_data import PROJECTS, ProjectRecord

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

REQUIRED = ("title", "description", "image_path", "link")


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def validate_record(record: ProjectRecord, index: int) -> list[str]:
    """Problems for one record, labelled by position (and title when present)."""
    problems = []
    label = f"#{index}"
    title = getattr(record, "title", None)
    if isinstance(title, str) and title:
        label = f"#{index} ({title})"
    for key in REQUIRED:
        val = getattr(record, key, None)
        if val is None:
            problems.append(f"{label}: missing {key}")
        elif not isinstance(val, str):
            problems.append(f"{label}: {key} is {type(val).__name__}, expected str")
        elif not val.strip():
            problems.append(f"{label}: {key} is empty")
    return problems


def validate_catalog(catalog: Iterable[ProjectRecord] | None = None) -> list[str]:
    problems: list[str] = []
    for i, rec in enumerate(PROJECTS if catalog is None else catalog):
        problems.extend(validate_record(rec, i))
    return problems


def main(catalog: Iterable[ProjectRecord] | None = None) -> int:
    records = list(PROJECTS if catalog is None else catalog)
    print(f"[catalog] records: {len(records)}")
    problems = validate_catalog(records)
    if problems:
        print("Problems found:")
        for p in problems:
            print("  -", p)
        return 1
    print("OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
