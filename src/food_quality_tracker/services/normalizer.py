"""Mapping of catalog vocabularies onto canonical product fields.

Every extraction here is total: missing or malformed values resolve to a
default instead of raising, since upstream catalog data quality varies.
"""

from food_quality_tracker.domain.products import NormalizedFields, NutritionalInfo

ALLERGEN_LABELS = {
    "milk": "Lait",
    "eggs": "Œufs",
    "fish": "Poisson",
    "crustaceans": "Crustacés",
    "tree-nuts": "Fruits à coque",
    "peanuts": "Arachides",
    "soybeans": "Soja",
    "gluten": "Gluten",
    "celery": "Céleri",
    "mustard": "Moutarde",
    "sesame-seeds": "Graines de sésame",
    "sulphur-dioxide-and-sulphites": "Sulfites",
    "lupin": "Lupin",
    "molluscs": "Mollusques",
}

# Evaluated in order; the first keyword found in the tag wins.
CATEGORY_RULES = (
    ("dairy", "Produits laitiers"),
    ("meat", "Viande"),
    ("fish", "Poisson"),
    ("fruits", "Fruits et légumes"),
    ("vegetables", "Fruits et légumes"),
    ("bread", "Boulangerie"),
    ("beverages", "Boissons"),
    ("breakfast", "Petit-déjeuner"),
    ("cereals", "Petit-déjeuner"),
    ("canned", "Conserves"),
    ("frozen", "Surgelés"),
)
DEFAULT_CATEGORY = "Épicerie"
CANONICAL_CATEGORIES = frozenset(
    [label for _, label in CATEGORY_RULES] + [DEFAULT_CATEGORY]
)

GRADES = frozenset("ABCDE")
DEFAULT_GRADE = "C"
UNKNOWN_PRODUCT_NAME = "Produit inconnu"

_NUTRIENT_KEYS = {
    "calories": "energy-kcal_100g",
    "protein": "proteins_100g",
    "carbs": "carbohydrates_100g",
    "fat": "fat_100g",
    "fiber": "fiber_100g",
    "sugar": "sugars_100g",
    "salt": "salt_100g",
}


def strip_namespace(tag: str) -> str:
    """Drop a language prefix such as ``en:`` from a catalog tag."""
    _, sep, rest = tag.partition(":")
    return rest if sep else tag


def map_allergens(tags: object) -> tuple[list[str], list[str]]:
    """Translate allergen tags, returning (canonical, unrecognized)."""
    canonical: list[str] = []
    unrecognized: list[str] = []
    if not isinstance(tags, list):
        return canonical, unrecognized
    for tag in tags:
        if not isinstance(tag, str):
            continue
        key = strip_namespace(tag)
        label = ALLERGEN_LABELS.get(key)
        if label is None:
            if key and key not in unrecognized:
                unrecognized.append(key)
            continue
        if label not in canonical:
            canonical.append(label)
    return canonical, unrecognized


def map_category(tag: str | None) -> str:
    """Map a free-form category tag onto a canonical category."""
    if not tag:
        return DEFAULT_CATEGORY
    lowered = tag.lower()
    for keyword, label in CATEGORY_RULES:
        if keyword in lowered:
            return label
    return DEFAULT_CATEGORY


def normalize_grade(value: object) -> str:
    """Uppercase a grade letter, defaulting to C when absent or invalid."""
    if not isinstance(value, str):
        return DEFAULT_GRADE
    grade = value.strip().upper()
    return grade if grade in GRADES else DEFAULT_GRADE


def split_ingredients(text: object) -> list[str]:
    """Split a comma-delimited ingredient listing, keeping source order."""
    if not isinstance(text, str):
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def extract_nutrients(nutriments: object) -> NutritionalInfo:
    """Read per-100g nutrient values, defaulting each to zero."""
    source = nutriments if isinstance(nutriments, dict) else {}
    values = {
        field_name: _to_float(source.get(key))
        for field_name, key in _NUTRIENT_KEYS.items()
    }
    return NutritionalInfo(**values)


def normalize(payload: dict[str, object]) -> NormalizedFields:
    """Normalize a catalog product payload into canonical fields."""
    allergens, unrecognized = map_allergens(payload.get("allergens_tags"))
    return NormalizedFields(
        name=_text(payload.get("product_name")) or UNKNOWN_PRODUCT_NAME,
        brand=_text(payload.get("brands")),
        category=map_category(_first_category_tag(payload.get("categories_tags"))),
        allergens=allergens,
        unrecognized_allergens=unrecognized,
        ingredients=split_ingredients(payload.get("ingredients_text")),
        nutritional_info=extract_nutrients(payload.get("nutriments")),
        nutrition_grade=normalize_grade(payload.get("nutrition_grades")),
        eco_score=normalize_grade(payload.get("ecoscore_grade")),
        image_url=_text(payload.get("image_url")) or None,
    )


def _first_category_tag(tags: object) -> str | None:
    if not isinstance(tags, list) or not tags or not isinstance(tags[0], str):
        return None
    return strip_namespace(tags[0])


def _text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def _to_float(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
