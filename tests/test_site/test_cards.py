"""
tests/test_site/test_cards.py - Tests for the card view model.
"""

from __future__ import annotations

from helpshelf_site.services.cards import CardView


def test_collapsed_fields(make_resource):
    card = CardView.from_resource(make_resource(why_it_helps="Because.", category="physical"))
    assert card.rationale == "Because."
    assert card.category_label == "Physical"
    assert card.icon == "⏰"


def test_rationale_falls_back_to_description(make_resource):
    card = CardView.from_resource(make_resource(why_it_helps="", description="Short."))
    assert card.rationale == "Short."


def test_primary_needs_and_overflow(make_resource):
    r = make_resource(support_needs=("time_blindness", "transitioning", "overwhelm"))
    card = CardView.from_resource(r, primary_count=2)
    assert card.need_labels == ("Time awareness", "Switching tasks")
    assert card.more_needs == 1


def test_no_overflow_when_few_needs(make_resource):
    card = CardView.from_resource(make_resource(support_needs=("focus",)), primary_count=2)
    assert card.need_labels == ("Staying focused",)
    assert card.more_needs == 0


def test_meta_line(make_resource):
    r = make_resource(price_type="free", setup_effort="low", sensory_load="medium", domain="example.com")
    assert CardView.from_resource(r).meta == ("Free", "Low setup", "Medium sensory", "example.com")


def test_favicon_url(make_resource):
    card = CardView.from_resource(
        make_resource(domain="example.com"),
        favicon_template="https://icons.test/{domain}.png",
    )
    assert card.favicon_url == "https://icons.test/example.com.png"


def test_default_favicon_template(make_resource):
    card = CardView.from_resource(make_resource(domain="focusmate.com"))
    assert "domain=focusmate.com" in card.favicon_url
