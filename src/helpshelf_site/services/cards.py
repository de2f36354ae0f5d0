"""Card view model for one resource."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from helpshelf_shared.config import settings
from helpshelf_shared.constants import CATEGORY_ICONS, CATEGORY_LABELS, SUPPORT_NEED_LABELS
from helpshelf_shared.models import Resource


@dataclass(frozen=True)
class CardView:
    id: str
    title: str
    url: str
    rationale: str
    category_label: str
    icon: str
    favicon_url: str
    need_labels: tuple[str, ...]
    more_needs: int
    meta: tuple[str, ...]

    @classmethod
    def from_resource(
        cls,
        resource: Resource,
        *,
        primary_count: int | None = None,
        favicon_template: str | None = None,
    ) -> "CardView":
        """
        Collapsed cards show title, rationale and link; the details panel
        shows the first primary_count need labels, an overflow count and
        the price/setup/sensory/domain line.
        """
        if primary_count is None:
            primary_count = settings.card_primary_needs
        template = favicon_template or settings.favicon_url_template
        needs = resource.support_needs
        return cls(
            id=resource.id,
            title=resource.title,
            url=resource.url,
            rationale=resource.why_it_helps or resource.description,
            category_label=CATEGORY_LABELS[resource.category],
            icon=CATEGORY_ICONS[resource.category],
            favicon_url=template.format(domain=quote(resource.domain, safe="")),
            need_labels=tuple(SUPPORT_NEED_LABELS[n] for n in needs[:primary_count]),
            more_needs=max(len(needs) - primary_count, 0),
            meta=(
                resource.price_type.capitalize(),
                f"{resource.setup_effort.capitalize()} setup",
                f"{resource.sensory_load.capitalize()} sensory",
                resource.domain,
            ),
        )
