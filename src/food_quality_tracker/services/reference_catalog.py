"""Curated reference products resolved without a catalog request.

Values are pre-vetted: safety scores and risk factors are used as-is rather
than recomputed.
"""

REFERENCE_PRODUCTS: dict[str, dict[str, object]] = {
    "3033710074617": {
        "name": "Lait UHT Demi-écrémé",
        "brand": "Candia",
        "category": "Produits laitiers",
        "image_url": "https://images.pexels.com/photos/416978/pexels-photo-416978.jpeg",  # noqa: E501
        "ingredients": ["Lait demi-écrémé", "Vitamines A et D"],
        "allergens": ["Lait"],
        "nutritional_info": {
            "calories": 46,
            "protein": 3.2,
            "carbs": 4.8,
            "fat": 1.5,
            "fiber": 0,
            "sugar": 4.8,
            "salt": 0.1,
        },
        "nutrition_grade": "B",
        "eco_score": "C",
        "safety_score": 4,
        "risk_factors": [],
    },
    "3017620422003": {
        "name": "Yaourt Nature",
        "brand": "Danone",
        "category": "Produits laitiers",
        "image_url": "https://images.pexels.com/photos/1435735/pexels-photo-1435735.jpeg",  # noqa: E501
        "ingredients": ["Lait entier", "Ferments lactiques"],
        "allergens": ["Lait"],
        "nutritional_info": {
            "calories": 60,
            "protein": 4.5,
            "carbs": 6.0,
            "fat": 1.2,
            "fiber": 0,
            "sugar": 6.0,
            "salt": 0.1,
        },
        "nutrition_grade": "A",
        "eco_score": "B",
        "safety_score": 5,
        "risk_factors": [],
    },
    "3274080005003": {
        "name": "Pain de mie complet",
        "brand": "Harry's",
        "category": "Boulangerie",
        "image_url": "https://images.pexels.com/photos/1775043/pexels-photo-1775043.jpeg",  # noqa: E501
        "ingredients": [
            "Farine de blé complète",
            "Eau",
            "Levure",
            "Sel",
            "Sucre",
            "Huile de tournesol",
        ],
        "allergens": ["Gluten"],
        "nutritional_info": {
            "calories": 247,
            "protein": 8.5,
            "carbs": 41.0,
            "fat": 4.2,
            "fiber": 6.0,
            "sugar": 3.0,
            "salt": 1.2,
        },
        "nutrition_grade": "B",
        "eco_score": "C",
        "safety_score": 4,
        "risk_factors": ["preservative additives"],
    },
    "3560070462926": {
        "name": "Pommes Golden",
        "brand": "Bio Village",
        "category": "Fruits et légumes",
        "image_url": "https://images.pexels.com/photos/102104/pexels-photo-102104.jpeg",  # noqa: E501
        "ingredients": ["Pommes Golden biologiques"],
        "allergens": [],
        "nutritional_info": {
            "calories": 52,
            "protein": 0.3,
            "carbs": 14.0,
            "fat": 0.2,
            "fiber": 2.4,
            "sugar": 10.4,
            "salt": 0.001,
        },
        "nutrition_grade": "A",
        "eco_score": "A",
        "safety_score": 3,
        "risk_factors": ["pesticide residues detected"],
    },
    "8712566441174": {
        "name": "Céréales Choco Pops",
        "brand": "Kellogg's",
        "category": "Petit-déjeuner",
        "image_url": "https://images.pexels.com/photos/5946071/pexels-photo-5946071.jpeg",  # noqa: E501
        "ingredients": [
            "Riz",
            "Sucre",
            "Cacao en poudre",
            "Sel",
            "Arôme de malt d'orge",
            "Vitamines et minéraux",
        ],
        "allergens": ["Gluten"],
        "nutritional_info": {
            "calories": 375,
            "protein": 4.2,
            "carbs": 84.0,
            "fat": 1.5,
            "fiber": 2.0,
            "sugar": 35.0,
            "salt": 0.9,
        },
        "nutrition_grade": "D",
        "eco_score": "D",
        "safety_score": 2,
        "risk_factors": ["high sugar", "artificial additives", "ultra-processed food"],
    },
}
