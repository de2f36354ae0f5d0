"""
tests/conftest.py - Shared pytest fixtures for the helpshelf test suite.

Provides:
  sample_csv_text  - spreadsheet export exercising every transformer rule
  sample_csv_path  - the same text written to tmp_path/approved.csv
  make_resource    - factory for Resource models with sensible defaults
  sample_resources - a small hand-built catalog covering every section
  catalog / client - FastAPI TestClient over an injected catalog
"""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog
from fastapi.testclient import TestClient

from helpshelf_shared.models import Resource

HEADER = (
    "Timestamp,Approved,Resource name,Link to the resource,What type is this?,"
    "What does this help with?,Why is this helpful?,Sensory Load (Optional),"
    "Setup effort (optional),Price type (Optional),Featured"
)


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo logging set up by CLI invocations inside a test."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


SAMPLE_ROWS = [
    '2024-01-02,TRUE,Focus Timer,https://example.com/app,App,'
    '"Starting tasks, Staying focused",Breaks work into short sprints. Great for starting.,'
    "Low,Low,Free,yes",
    '2024-01-03,yes,Body Doubling Club,https://www.focusmate.com/,Body doubling group,'
    '"Starting tasks; Following through","Work alongside others on video.\nAccountability helps.",'
    "Medium,Medium,Freemium,",
    "2024-01-04,FALSE,Hidden Gem,https://hidden.example.org,App,Staying focused,"
    "Not approved yet.,,,,yes",
    "2024-01-05,1,Pomodoro Technique,https://en.wikipedia.org/wiki/Pomodoro_Technique,"
    '"Practice / framework","Time awareness, Switching tasks",Work in 25 minute blocks,'
    "Not sure,low,free,no",
    "2024-01-06,true,,https://no-title.example.com,App,,,,,,",
    '2024-01-07,true,Focus Timer,not a url,Visual timer device,'
    '"Feeling overwhelmed, feeling overwhelmed, Planning and organization, Planning & organization",'
    '"He said ""hi"", then left! More text.",HIGH,high,Paid,FALSE',
    ",,,,,,,,,,",
]


@pytest.fixture
def sample_csv_text() -> str:
    return "\r\n".join([HEADER, *SAMPLE_ROWS]) + "\r\n"


@pytest.fixture
def sample_csv_path(tmp_path: Path, sample_csv_text: str) -> Path:
    path = tmp_path / "approved.csv"
    path.write_text(sample_csv_text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Resource models
# ---------------------------------------------------------------------------

@pytest.fixture
def make_resource():
    def _make(id: str = "focus-timer", **overrides) -> Resource:
        fields = {
            "id": id,
            "title": id.replace("-", " ").title(),
            "url": f"https://{id}.example.com",
            "description": "Helps a little.",
            "why_it_helps": "Helps a little. Really.",
            "category": "tool",
            "support_needs": (),
            "sensory_load": "low",
            "setup_effort": "high",
            "price_type": "freemium",
            "featured": False,
            "domain": f"{id}.example.com",
        }
        fields.update(overrides)
        return Resource(**fields)

    return _make


@pytest.fixture
def sample_resources(make_resource) -> list[Resource]:
    return [
        make_resource(
            "focus-timer",
            title="Focus Timer",
            description="Breaks work into short sprints.",
            support_needs=("task_initiation", "focus"),
            setup_effort="low",
            price_type="free",
            featured=True,
            domain="example.com",
        ),
        make_resource(
            "time-timer",
            title="Time Timer",
            category="physical",
            support_needs=("time_blindness", "transitioning", "overwhelm"),
            price_type="paid",
        ),
        make_resource(
            "brain-dump",
            title="Brain Dump",
            category="method",
            support_needs=("working_memory", "overwhelm"),
            setup_effort="medium",
            price_type="free",
        ),
        make_resource(
            "focusmate",
            title="Focusmate",
            category="community",
            support_needs=("task_initiation", "follow_through"),
            setup_effort="medium",
            sensory_load="medium",
            domain="focusmate.com",
        ),
        make_resource(
            "how-to-adhd",
            title="How to ADHD",
            category="content",
            support_needs=("focus",),
            setup_effort="high",
            sensory_load="high",
            domain="youtube.com",
        ),
    ]


@pytest.fixture
def catalog(sample_resources):
    from helpshelf_site.services.catalog_service import Catalog

    return Catalog.from_resources(sample_resources)


@pytest.fixture
def client(catalog) -> TestClient:
    from helpshelf_site.app import create_app

    return TestClient(create_app(catalog=catalog))


@pytest.fixture
def no_data_client(tmp_path: Path) -> TestClient:
    """Site started before any resources file was built."""
    from helpshelf_site.app import create_app

    return TestClient(create_app(resources_path=tmp_path / "missing.json"))
