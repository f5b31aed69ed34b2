"""Tests for safety scoring and risk factors."""

from food_quality_tracker.services.scoring import clamp_score, score


def _additives(count: int) -> list[str]:
    return [f"en:e{100 + index}" for index in range(count)]


def test_clean_product_keeps_max_score() -> None:
    assessment = score({}, [])

    assert assessment.safety_score == 5
    assert assessment.risk_factors == []


def test_ultra_processed_salty_product_with_many_additives() -> None:
    payload = {
        "additives_tags": _additives(12),
        "nova_group": 4,
        "nutrient_levels": {"salt": "high"},
    }

    assessment = score(payload, [])

    assert assessment.safety_score == 3
    assert assessment.risk_factors == [
        "ultra-processed food",
        "numerous additives",
        "high salt",
    ]


def test_all_deductions_stack() -> None:
    payload = {"additives_tags": _additives(6), "nova_group": "4"}

    assessment = score(payload, ["Lait", "Gluten", "Soja", "Œufs"])

    assert assessment.safety_score == 2
    assert assessment.risk_factors == ["ultra-processed food"]


def test_thresholds_are_strict() -> None:
    payload = {"additives_tags": _additives(5), "nova_group": 3}

    assessment = score(payload, ["Lait", "Gluten", "Soja"])

    assert assessment.safety_score == 5
    assert assessment.risk_factors == []


def test_nutrient_level_flags_in_check_order() -> None:
    payload = {"nutrient_levels": {"fat": "high", "sugars": "high", "salt": "high"}}

    assessment = score(payload, [])

    assert assessment.risk_factors == ["high salt", "high sugar", "high fat"]
    assert assessment.safety_score == 5


def test_malformed_inputs_do_not_raise() -> None:
    payload = {"additives_tags": "en:e100", "nova_group": "n/a", "nutrient_levels": []}

    assessment = score(payload, [])

    assert assessment.safety_score == 5
    assert assessment.risk_factors == []


def test_clamp_score_bounds() -> None:
    assert clamp_score(-4) == 1
    assert clamp_score(0) == 1
    assert clamp_score(3) == 3
    assert clamp_score(9) == 5
