from strengthlab.analyzers.tiers import STRENGTH_TIERS, tier_for


def test_table_is_ordered_weakest_to_strongest():
    assert [tier.score for tier in STRENGTH_TIERS] == [0, 1, 2, 3, 4]
    assert [tier.label for tier in STRENGTH_TIERS] == [
        "Very weak",
        "Weak",
        "Okay",
        "Strong",
        "Excellent",
    ]


def test_exact_lookup():
    assert tier_for(0) == STRENGTH_TIERS[0]
    assert tier_for(2).label == "Okay"
    assert tier_for(4) == STRENGTH_TIERS[-1]


def test_out_of_range_falls_back_to_weakest():
    assert tier_for(7) == STRENGTH_TIERS[0]
    assert tier_for(-1) == STRENGTH_TIERS[0]


def test_every_tier_has_a_hex_colour():
    for tier in STRENGTH_TIERS:
        assert tier.color.startswith("#")
        assert len(tier.color) == 7
