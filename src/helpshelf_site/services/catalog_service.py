"""
Catalog loading, filtering and display sections.

The record list is read once from the resources file and held in an
immutable Catalog; every request filters and groups views over it.

Usage:
    from helpshelf_site.services.catalog_service import load_catalog, group_sections

    catalog = load_catalog(Path("data/resources.json"))   # None if missing
    matched = catalog.filter(filters)
    for section in group_sections(matched):
        print(section.title, len(section.resources))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

import structlog

from helpshelf_shared.constants import SUPPORT_NEED_LABELS
from helpshelf_shared.models import Resource
from helpshelf_shared.store import read_resources

from helpshelf_site.services.filters import CatalogFilters

logger = structlog.get_logger(__name__)


def available_support_needs(resources: Iterable[Resource]) -> tuple[str, ...]:
    """Distinct support needs present in resources, sorted by display label."""
    present = {need for r in resources for need in r.support_needs}
    return tuple(sorted(present, key=lambda n: SUPPORT_NEED_LABELS[n].casefold()))


@dataclass(frozen=True)
class Catalog:
    resources: tuple[Resource, ...]
    available_support_needs: tuple[str, ...]

    @classmethod
    def from_resources(cls, resources: Iterable[Resource]) -> "Catalog":
        items = tuple(resources)
        return cls(resources=items, available_support_needs=available_support_needs(items))

    def __len__(self) -> int:
        return len(self.resources)

    def get(self, resource_id: str) -> Resource | None:
        return next((r for r in self.resources if r.id == resource_id), None)

    def filter(self, filters: CatalogFilters) -> list[Resource]:
        return [r for r in self.resources if filters.matches(r)]


def load_catalog(path: Path) -> Catalog | None:
    """Load the resources file; None when it has not been built yet."""
    resources = read_resources(path)
    if resources is None:
        return None
    catalog = Catalog.from_resources(resources)
    logger.info(
        "catalog_loaded",
        path=str(path),
        resources=len(catalog),
        support_needs=len(catalog.available_support_needs),
    )
    return catalog


# ---------------------------------------------------------------------------
# Display sections
# ---------------------------------------------------------------------------

TIME_NEEDS = frozenset({"time_blindness", "transitioning"})


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    resources: tuple[Resource, ...]


# Checked in order; a resource lands in the first section whose rule matches
SECTION_RULES: list[tuple[str, str, Callable[[Resource], bool]]] = [
    ("featured", "Featured", lambda r: r.featured),
    ("time", "When time slips away", lambda r: not TIME_NEEDS.isdisjoint(r.support_needs)),
    (
        "getting_started",
        "Getting started / low effort",
        lambda r: r.setup_effort == "low" or r.category == "method",
    ),
    ("community", "Community & body doubling", lambda r: r.category == "community"),
    ("other", "More resources", lambda r: True),
]


def section_key(resource: Resource) -> str:
    for key, _, rule in SECTION_RULES:
        if rule(resource):
            return key
    return SECTION_RULES[-1][0]


def group_sections(resources: Sequence[Resource]) -> list[Section]:
    """Partition resources into display sections, dropping empty ones."""
    buckets: dict[str, list[Resource]] = {key: [] for key, _, _ in SECTION_RULES}
    for resource in resources:
        buckets[section_key(resource)].append(resource)
    return [
        Section(key=key, title=title, resources=tuple(buckets[key]))
        for key, title, _ in SECTION_RULES
        if buckets[key]
    ]
