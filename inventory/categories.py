"""
Clothing Catalogue

Category and subcategory codes with their Portuguese display labels,
plus the item status/disposition vocabularies. Codes are what gets
stored on ClothingItem rows and what the search parser emits.
"""

CLOTHING_CATEGORIES = {
    "CLOTHES": {
        "label": "Roupa",
        "subcategories": {
            "BODIES_SHORT": "Bodies (curto)",
            "BODIES_LONG": "Bodies (comprido)",
            "BODIES_SLEEVELESS": "Bodies (sem mangas)",
            "TSHIRTS_SHORT": "T-shirts (curto)",
            "TSHIRTS_LONG": "T-shirts (comprido)",
            "TSHIRTS_SLEEVELESS": "T-shirts (sem mangas)",
            "SHORTS": "Calções",
            "PANTS_SPORTSWEAR": "Calças (fato treino)",
            "PANTS_LEGGINGS": "Calças (leggings)",
            "PANTS_DENIM": "Calças (ganga)",
            "PANTS_CHINO": "Calças (sarja)",
            "PANTS_FABRIC": "Calças (tecido)",
            "JACKETS_SPORTSWEAR": "Casacos (fato de treino)",
            "JACKETS_KNIT": "Casacos (malha)",
            "JACKETS_WINDBREAKER": "Casacos (corta vento)",
            "JACKETS_BOMBER": "Casacos (bomber)",
            "SKIRT": "Saia",
            "ONEPIECE_FUZZY": "Peça única (fofo)",
            "ONEPIECE_DRESS": "Peça única (vestido)",
            "OVERALLS_SKIRT": "Macacão (saia)",
            "OVERALLS_PANTS": "Macacão (calça)",
            "OVERALLS_SHORTS": "Macacão (calção)",
            "PAJAMAS_ONESIE_FEET": "Pijama (onesie c/pés)",
            "PAJAMAS_ONESIE_SHORT": "Pijama (onesie curto)",
            "PAJAMAS_ONESIE_NO_FEET": "Pijama (onesie s/pés)",
            "PAJAMAS_TWO_PIECE": "Pijama (2 peças)",
            "SWEATERS_KNIT": "Camisolas (malha)",
            "SWEATERS_HOODIE": "Camisolas (sweat c/capuz)",
            "SWEATERS_SWEATSHIRT": "Camisolas (sweat sem capuz)",
            "VEST": "Colete",
        },
    },
    "SHOES": {
        "label": "Sapatos",
        "subcategories": {
            "SNEAKERS": "Ténis",
            "SANDALS": "Sandálias",
            "FLIPFLOPS": "Chinelos",
            "BOOTS": "Botas",
        },
    },
    "ACCESSORIES": {
        "label": "Acessórios",
        "subcategories": {
            "SOCKS": "Meias",
            "TIGHTS": "Collants",
            "HAT": "Gorro",
            "CAP": "Chapéu",
            "SCARF": "Cachecol",
            "BOWS_HEADBANDS": "Laços/bandoletes",
        },
    },
    "BATH_BED": {
        "label": "Banho/Cama",
        "subcategories": {
            "TOWEL": "Toalha",
            "SHEETS": "Lençóis",
            "DUVET": "Edredom",
            "BLANKET": "Manta",
            "MATTRESS_PROTECTOR": "Protetor de colchão",
        },
    },
}

ITEM_STATUSES = {
    "IN_USE": "Em uso",
    "FUTURE_USE": "Uso futuro",
    "RETIRED": "Retirado",
}

ITEM_DISPOSITIONS = {
    "KEEP": "Manter",
    "SOLD": "Vendido",
    "GIVEN_AWAY": "Oferecido",
}

# Django field choices
CATEGORY_CHOICES = [(code, data["label"]) for code, data in CLOTHING_CATEGORIES.items()]
SUBCATEGORY_CHOICES = [
    (code, label)
    for data in CLOTHING_CATEGORIES.values()
    for code, label in data["subcategories"].items()
]
STATUS_CHOICES = list(ITEM_STATUSES.items())
DISPOSITION_CHOICES = list(ITEM_DISPOSITIONS.items())


def get_subcategories(category: str) -> dict:
    """Subcategory code -> label for a category (empty for unknown codes)."""
    return CLOTHING_CATEGORIES.get(category, {}).get("subcategories", {})


def get_category_label(category: str) -> str:
    return CLOTHING_CATEGORIES.get(category, {}).get("label", category)


def get_subcategory_label(category: str, subcategory: str) -> str:
    return get_subcategories(category).get(subcategory, subcategory)
