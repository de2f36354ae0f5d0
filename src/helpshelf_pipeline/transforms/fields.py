"""
transforms/fields.py - Parse-with-default helpers for spreadsheet cells.

Every function here takes a raw cell string and always returns a valid
value: malformed, empty or unrecognized input falls back to the documented
default instead of raising. None of them touch I/O.

Usage:
    from helpshelf_pipeline.transforms.fields import parse_category, parse_option

    parse_category("Browser extension")                         # "tool"
    parse_option("Not sure", ("low", "medium", "high"), "low")  # "low"
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from functools import cache
from urllib.parse import urlsplit

from pyuca import Collator

from helpshelf_shared.constants import (
    DEFAULT_CATEGORY,
    DESCRIPTION_FALLBACK_CHARS,
    UNKNOWN_DOMAIN,
)

# Keyword groups checked in order; the first group with a hit wins
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("tool", ("app", "software", "extension")),
    ("method", ("practice", "framework", "routine")),
    ("community", ("group", "body doubling", "co-working")),
    ("content", ("video", "podcast", "book", "newsletter")),
    ("physical", ("timer", "journal", "device")),
)

# Lowercased "helps with" phrase -> support need
SUPPORT_NEED_PHRASES: dict[str, str] = {
    "time awareness": "time_blindness",
    "starting tasks": "task_initiation",
    "prioritizing": "prioritization",
    "planning & organization": "planning",
    "planning and organization": "planning",
    "remembering steps & details": "working_memory",
    "remembering steps and details": "working_memory",
    "following through": "follow_through",
    "staying focused": "focus",
    "reducing distractions": "distraction",
    "switching tasks": "transitioning",
    "feeling overwhelmed": "overwhelm",
    "sensory sensitivity": "sensory_sensitivity",
    "low-energy days": "low_energy",
    "low energy days": "low_energy",
    "accessibility support": "accessibility_support",
}

TRUTHY_VALUES = frozenset({"true", "yes", "1"})

_NEED_SEPARATORS = re.compile(r"[,;]")
_FIRST_SENTENCE = re.compile(r"^[^.!?]+[.!?]")
_SLUG_DROP = re.compile(r"[^A-Za-z0-9_\s-]")
_SLUG_JOIN = re.compile(r"[\s_-]+")


def is_truthy(value: str | None) -> bool:
    """True for "true", "yes" or "1" (case-insensitive); False otherwise."""
    if not value:
        return False
    return value.strip().lower() in TRUTHY_VALUES


def parse_category(type_text: str | None) -> str:
    """Map the free-text "What type is this?" cell to a category."""
    normalized = (type_text or "").strip().lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(k in normalized for k in keywords):
            return category
    return DEFAULT_CATEGORY


def parse_support_needs(helps_with: str | None) -> list[str]:
    """
    Map a comma/semicolon separated "helps with" cell to support needs.

    Unknown phrases are dropped; the result keeps first-seen order with
    duplicates removed.
    """
    if not helps_with:
        return []
    parts = (p.strip().lower() for p in _NEED_SEPARATORS.split(helps_with))
    needs = (SUPPORT_NEED_PHRASES[p] for p in parts if p in SUPPORT_NEED_PHRASES)
    return list(dict.fromkeys(needs))


def parse_option(value: str | None, options: Sequence[str], default: str) -> str:
    """
    Case-insensitive exact match against a fixed option set.

    Empty input, "not sure" and anything outside the set return default.
    """
    if not value:
        return default
    normalized = value.strip().lower()
    if normalized in ("", "not sure"):
        return default
    for option in options:
        if normalized == option.lower():
            return option.lower()
    return default


def first_sentence(text: str | None) -> str:
    """
    First sentence of text (up to and including the first . ! or ?).

    Without a sentence boundary the first 120 characters plus "..." are
    returned. Empty input gives an empty string.
    """
    if not text:
        return ""
    match = _FIRST_SENTENCE.match(text)
    if match:
        return match.group(0).strip()
    return text[:DESCRIPTION_FALLBACK_CHARS] + "..."


def extract_domain(url: str | None) -> str:
    """Hostname of url without a leading "www.", or "unknown"."""
    if not url:
        return UNKNOWN_DOMAIN
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
    except ValueError:
        return UNKNOWN_DOMAIN
    if not parts.scheme or not hostname:
        return UNKNOWN_DOMAIN
    return hostname.removeprefix("www.")


def slugify(text: str | None) -> str:
    """
    Lowercase URL slug: non-word characters dropped, whitespace, underscore
    and hyphen runs collapsed to one hyphen, no leading/trailing hyphens.
    """
    s = (text or "").lower().strip()
    s = _SLUG_DROP.sub("", s)
    s = _SLUG_JOIN.sub("-", s)
    return s.strip("-")


def assign_unique_ids(slugs: Iterable[str], *, fallback: str = "resource") -> list[str]:
    """
    Disambiguate slugs in order: the second "foo" becomes "foo-2", the
    third "foo-3", and so on. Empty slugs use fallback as their base.
    """
    counts: dict[str, int] = {}
    used: set[str] = set()
    ids: list[str] = []
    for slug in slugs:
        base = slug or fallback
        count = counts.get(base, 0)
        candidate = base if count == 0 else f"{base}-{count + 1}"
        # A literal title like "Foo 2" can already own "foo-2"
        while candidate in used:
            count += 1
            candidate = f"{base}-{count + 1}"
        counts[base] = count + 1
        used.add(candidate)
        ids.append(candidate)
    return ids


@cache
def _collator() -> Collator:
    # Loads the default collation table once per process
    return Collator()


def title_sort_key(title: str) -> str:
    """
    Unicode collation key for title ordering.

    Symbols and emoji sort before letters, accents and case only break
    ties, and lowercase sorts before uppercase. Weights are rendered as
    fixed-width hex so the key compares correctly as a plain string.
    """
    return "".join(f"{weight:05x}" for weight in _collator().sort_key(title))
