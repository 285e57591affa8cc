"""
Tests for the YAML message catalogs.
"""

import pytest

from backend.engine.rating import Rating
from narration import MessageCatalog, CatalogNotFoundError, available_languages


REQUIRED_KEYS = [
    "state_year",
    "state_population",
    "state_wheat",
    "state_land",
    "land_price",
    "error",
    "invalid_input",
    "harvest",
    "rats",
    "starvation",
    "plague",
    "immigrants",
    "prompt_continue_saved",
    "prompt_quit",
    "saved_goodbye",
    "game_over",
] + [
    f"{kind}_{step}"
    for kind in ("prompt", "error")
    for step in ("buy", "sell", "feed", "plant")
]


def test_available_languages():
    languages = available_languages()
    assert "en" in languages
    assert "ru" in languages


@pytest.mark.parametrize("language", ["en", "ru"])
def test_catalog_has_every_message(language):
    catalog = MessageCatalog(language)

    for key in REQUIRED_KEYS + [rating.value for rating in Rating]:
        assert key in catalog.messages, f"{language} catalog lacks {key}"


def test_catalogs_share_keys():
    assert MessageCatalog("en").keys() == MessageCatalog("ru").keys()


def test_render_formats_placeholders():
    catalog = MessageCatalog("en")

    assert (
        catalog.render("harvest", harvest=3000, multiplier=3)
        == "You harvested 3000 bushels of wheat (3 per acre)."
    )
    assert catalog.render("state_year", year=4) == "\nYear: 4"


def test_render_russian():
    catalog = MessageCatalog("ru")

    assert catalog.render("rats", rats=12) == "Крысы съели 12 бушелей пшеницы."


def test_prompts_end_with_space():
    """Console keeps the cursor on the prompt line for these."""
    catalog = MessageCatalog("en")

    for key in ("prompt_buy", "prompt_sell", "prompt_feed", "prompt_plant", "prompt_quit"):
        assert catalog.render(key).endswith(" ")


def test_missing_key_raises():
    with pytest.raises(KeyError):
        MessageCatalog("en").render("no_such_message")


def test_unknown_language_raises():
    with pytest.raises(CatalogNotFoundError):
        MessageCatalog("xx")
