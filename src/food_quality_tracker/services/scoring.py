"""Safety scoring and risk-factor detection for catalog products."""

from food_quality_tracker.domain.products import SafetyAssessment

MAX_SAFETY_SCORE = 5
MIN_SAFETY_SCORE = 1
ULTRA_PROCESSED_TIER = 4
ADDITIVE_DEDUCTION_THRESHOLD = 5
NUMEROUS_ADDITIVES_THRESHOLD = 10
ALLERGEN_DEDUCTION_THRESHOLD = 3

ULTRA_PROCESSED = "ultra-processed food"
NUMEROUS_ADDITIVES = "numerous additives"
HIGH_SALT = "high salt"
HIGH_SUGAR = "high sugar"
HIGH_FAT = "high fat"

_HIGH_LEVEL_FLAGS = (
    ("salt", HIGH_SALT),
    ("sugars", HIGH_SUGAR),
    ("fat", HIGH_FAT),
)


def clamp_score(score: int) -> int:
    """Bound a safety score to the inclusive [1, 5] range."""
    return max(MIN_SAFETY_SCORE, min(MAX_SAFETY_SCORE, score))


def score(payload: dict[str, object], allergens: list[str]) -> SafetyAssessment:
    """Compute the safety score and risk factors for a catalog payload."""
    additive_count = _additive_count(payload.get("additives_tags"))
    tier = _processing_tier(payload.get("nova_group"))
    ultra_processed = tier >= ULTRA_PROCESSED_TIER

    safety = MAX_SAFETY_SCORE
    if additive_count > ADDITIVE_DEDUCTION_THRESHOLD:
        safety -= 1
    if ultra_processed:
        safety -= 1
    if len(allergens) > ALLERGEN_DEDUCTION_THRESHOLD:
        safety -= 1

    risk_factors: list[str] = []
    if ultra_processed:
        risk_factors.append(ULTRA_PROCESSED)
    if additive_count > NUMEROUS_ADDITIVES_THRESHOLD:
        risk_factors.append(NUMEROUS_ADDITIVES)
    levels = payload.get("nutrient_levels")
    if isinstance(levels, dict):
        for key, flag in _HIGH_LEVEL_FLAGS:
            if levels.get(key) == "high":
                risk_factors.append(flag)

    return SafetyAssessment(safety_score=clamp_score(safety), risk_factors=risk_factors)


def _additive_count(tags: object) -> int:
    return len(tags) if isinstance(tags, list) else 0


def _processing_tier(value: object) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return 0
