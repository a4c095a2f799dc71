"""Tests for the template fallback pool."""

import random

import pytest

from agro_ads.models.ad import AdFormat, TextSource
from agro_ads.services.templates import LONG_TEMPLATES, SHORT_TEMPLATES, pick_template


class TestPickTemplate:
    """pick_template tests."""

    @pytest.mark.parametrize("ad_format", [AdFormat.SHORT, AdFormat.LONG])
    def test_contains_product_verbatim(self, ad_format):
        for seed in range(20):
            ad = pick_template("Premium Layer Mash", ad_format, random.Random(seed))
            assert "Premium Layer Mash" in ad.body
            assert ad.body.strip()
            assert ad.source == TextSource.TEMPLATE

    def test_every_template_has_product_slot(self):
        for template in SHORT_TEMPLATES + LONG_TEMPLATES:
            assert "{product}" in template

    def test_pools_sizes(self):
        assert 5 <= len(SHORT_TEMPLATES) <= 10
        assert 5 <= len(LONG_TEMPLATES) <= 10

    def test_short_pick_comes_from_short_pool(self):
        ad = pick_template("Dairy Meal", AdFormat.SHORT, random.Random(1))
        assert ad.body in {t.replace("{product}", "Dairy Meal") for t in SHORT_TEMPLATES}

    def test_braces_in_product_name_kept(self):
        ad = pick_template("Feed {x}", AdFormat.LONG, random.Random(0))
        assert "Feed {x}" in ad.body

    def test_selection_covers_pool(self):
        rng = random.Random(42)
        bodies = {pick_template("Mash", AdFormat.LONG, rng).body for _ in range(200)}
        assert len(bodies) == len(LONG_TEMPLATES)

    def test_farmers_choice_keeps_space_before_break(self):
        assert any("real results! \n\n" in template for template in LONG_TEMPLATES)
