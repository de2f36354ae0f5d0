"""
Catalog filter state.

The whole state lives in the page URL so every view is bookmarkable:

    ?q=timer&category=tool&need=focus&need=distraction&price=free
     &setup=low&sensory=low&featured=1&feeling=scattered

CatalogFilters is immutable; every UI action returns a new instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import urlencode

from helpshelf_shared.constants import (
    ALL,
    CATEGORIES,
    FEELING_PRESETS,
    LEVELS,
    PRICE_TYPES,
    SUPPORT_NEEDS,
)
from helpshelf_shared.models import Resource


def _choice(value: str | None, options: tuple[str, ...]) -> str:
    value = (value or "").strip().lower()
    return value if value in options else ALL


def _getlist(params: Any, key: str) -> list[str]:
    if hasattr(params, "getlist"):
        return list(params.getlist(key))
    value = params.get(key)
    if value is None:
        return []
    return [value] if isinstance(value, str) else list(value)


@dataclass(frozen=True)
class CatalogFilters:
    search: str = ""
    category: str = ALL
    support_needs: frozenset[str] = field(default_factory=frozenset)
    price_type: str = ALL
    setup_effort: str = ALL
    sensory_load: str = ALL
    featured_only: bool = False
    feeling: str | None = None

    # ------------------------------------------------------------------
    # URL round trip
    # ------------------------------------------------------------------

    @classmethod
    def from_query(cls, params: Any) -> "CatalogFilters":
        """
        Build filters from query params; unknown values are ignored.

        A feeling is kept only while the need set is exactly that preset's.
        """
        needs = frozenset(n for n in _getlist(params, "need") if n in SUPPORT_NEEDS)
        feeling = params.get("feeling")
        if feeling not in FEELING_PRESETS or frozenset(FEELING_PRESETS[feeling][2]) != needs:
            feeling = None
        return cls(
            search=(params.get("q") or "").strip(),
            category=_choice(params.get("category"), CATEGORIES),
            support_needs=needs,
            price_type=_choice(params.get("price"), PRICE_TYPES),
            setup_effort=_choice(params.get("setup"), LEVELS),
            sensory_load=_choice(params.get("sensory"), LEVELS),
            featured_only=(params.get("featured") or "").lower() in ("1", "true", "on", "yes"),
            feeling=feeling,
        )

    def to_query(self) -> list[tuple[str, str]]:
        """Query pairs for this state, omitting defaults; needs sorted."""
        pairs: list[tuple[str, str]] = []
        if self.search:
            pairs.append(("q", self.search))
        if self.category != ALL:
            pairs.append(("category", self.category))
        pairs.extend(("need", n) for n in sorted(self.support_needs))
        if self.price_type != ALL:
            pairs.append(("price", self.price_type))
        if self.setup_effort != ALL:
            pairs.append(("setup", self.setup_effort))
        if self.sensory_load != ALL:
            pairs.append(("sensory", self.sensory_load))
        if self.featured_only:
            pairs.append(("featured", "1"))
        if self.feeling:
            pairs.append(("feeling", self.feeling))
        return pairs

    @property
    def query_string(self) -> str:
        return urlencode(self.to_query())

    def href(self, path: str = "/") -> str:
        query = self.query_string
        return f"{path}?{query}" if query else path

    # ------------------------------------------------------------------
    # Predicate
    # ------------------------------------------------------------------

    def matches(self, resource: Resource) -> bool:
        if self.search:
            q = self.search.lower()
            if not (
                q in resource.title.lower()
                or q in resource.description.lower()
                or q in resource.domain.lower()
            ):
                return False
        if self.category != ALL and resource.category != self.category:
            return False
        if self.support_needs and self.support_needs.isdisjoint(resource.support_needs):
            return False
        if self.price_type != ALL and resource.price_type != self.price_type:
            return False
        if self.setup_effort != ALL and resource.setup_effort != self.setup_effort:
            return False
        if self.sensory_load != ALL and resource.sensory_load != self.sensory_load:
            return False
        if self.featured_only and not resource.featured:
            return False
        return True

    # ------------------------------------------------------------------
    # UI actions
    # ------------------------------------------------------------------

    @property
    def has_active_filters(self) -> bool:
        return self != CatalogFilters()

    def select_feeling(self, key: str) -> "CatalogFilters":
        """Swap in a preset's support needs and show every category."""
        _, _, needs = FEELING_PRESETS[key]
        return replace(self, support_needs=frozenset(needs), category=ALL, feeling=key)

    def toggle_need(self, need: str) -> "CatalogFilters":
        needs = set(self.support_needs)
        needs.symmetric_difference_update({need})
        return replace(self, support_needs=frozenset(needs), feeling=None)

    def with_category(self, category: str) -> "CatalogFilters":
        return replace(self, category=category)

    def cleared(self) -> "CatalogFilters":
        return CatalogFilters()
