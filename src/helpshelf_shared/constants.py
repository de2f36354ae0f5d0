"""
constants.py - shared constants used across the pipeline and the site.

Enum values, display labels, spreadsheet column names and the feeling
presets live here so the transformer and the catalog UI stay in sync.
"""

from __future__ import annotations

from typing import Final, Literal, get_args

# ---------------------------------------------------------------------------
# Typed literals
# ---------------------------------------------------------------------------
Category = Literal["tool", "method", "community", "content", "physical"]
SupportNeed = Literal[
    "time_blindness",
    "task_initiation",
    "prioritization",
    "planning",
    "working_memory",
    "follow_through",
    "focus",
    "distraction",
    "transitioning",
    "overwhelm",
    "sensory_sensitivity",
    "low_energy",
    "accessibility_support",
]
Level = Literal["low", "medium", "high"]
PriceType = Literal["free", "freemium", "paid"]

CATEGORIES: Final[tuple[str, ...]] = get_args(Category)
SUPPORT_NEEDS: Final[tuple[str, ...]] = get_args(SupportNeed)
LEVELS: Final[tuple[str, ...]] = get_args(Level)
PRICE_TYPES: Final[tuple[str, ...]] = get_args(PriceType)

# Sentinel used by every facet filter for "no constraint"
ALL: Final[str] = "all"

# ---------------------------------------------------------------------------
# Display labels
# ---------------------------------------------------------------------------
SUPPORT_NEED_LABELS: Final[dict[str, str]] = {
    "time_blindness": "Time awareness",
    "task_initiation": "Starting tasks",
    "prioritization": "Prioritizing",
    "planning": "Planning & organization",
    "working_memory": "Remembering steps & details",
    "follow_through": "Following through",
    "focus": "Staying focused",
    "distraction": "Reducing distractions",
    "transitioning": "Switching tasks",
    "overwhelm": "Feeling overwhelmed",
    "sensory_sensitivity": "Sensory sensitivity",
    "low_energy": "Low-energy days",
    "accessibility_support": "Accessibility support",
}

CATEGORY_LABELS: Final[dict[str, str]] = {
    "tool": "Tool",
    "method": "Method",
    "community": "Community",
    "content": "Content",
    "physical": "Physical",
}

# Shown in place of a favicon that fails to load
CATEGORY_ICONS: Final[dict[str, str]] = {
    "tool": "🔧",
    "method": "📋",
    "community": "👥",
    "content": "📚",
    "physical": "⏰",
}

# ---------------------------------------------------------------------------
# Spreadsheet export columns (matched case-insensitively)
# ---------------------------------------------------------------------------
SPREADSHEET_COLUMNS: Final[dict[str, str]] = {
    "approved": "Approved",
    "title": "Resource name",
    "url": "Link to the resource",
    "type": "What type is this?",
    "helps_with": "What does this help with?",
    "why_it_helps": "Why is this helpful?",
    "sensory_load": "Sensory Load (Optional)",
    "setup_effort": "Setup effort (optional)",
    "price_type": "Price type (Optional)",
    "featured": "Featured",
}

# ---------------------------------------------------------------------------
# Field defaults for the parse-with-default helpers
# ---------------------------------------------------------------------------
DEFAULT_CATEGORY: Final[str] = "tool"
DEFAULT_SENSORY_LOAD: Final[str] = "low"
DEFAULT_SETUP_EFFORT: Final[str] = "low"
DEFAULT_PRICE_TYPE: Final[str] = "freemium"
DESCRIPTION_FALLBACK_CHARS: Final[int] = 120
UNKNOWN_DOMAIN: Final[str] = "unknown"

# ---------------------------------------------------------------------------
# Feeling presets: key -> (glyph, label, support needs)
# ---------------------------------------------------------------------------
FEELING_PRESETS: Final[dict[str, tuple[str, str, tuple[str, ...]]]] = {
    "overwhelmed": ("🌀", "overwhelmed", ("overwhelm", "sensory_sensitivity", "low_energy")),
    "timeblind": ("⏰", "time-blind", ("time_blindness", "transitioning")),
    "stuck": ("🪨", "stuck starting", ("task_initiation", "prioritization")),
    "scattered": ("🫧", "scattered", ("focus", "distraction", "working_memory")),
}
