"""
Wardrobe Facet Dictionary

Hardcoded keyword tables used to turn free-text wardrobe queries into
structured facets. Keywords are lowercase Portuguese terms; accented and
unaccented spellings are listed separately because queries are only
lower-cased, never accent-folded.

Tables:
- CATEGORY_KEYWORDS: keyword/phrase -> category codes
- SUBCATEGORY_KEYWORDS: keyword/phrase -> subcategory codes
- COLOR_KEYWORDS: recognised colour names (simple and compound)
- SIZE_PATTERNS: compiled size-range expressions

Table order matters: category and subcategory lookups stop at the first
keyword found, in the order listed here.
"""

import re
from types import MappingProxyType

# =============================================================================
# CATEGORIES
# =============================================================================
_CLOTHES = ("CLOTHES",)
_SHOES = ("SHOES",)
_ACCESSORIES = ("ACCESSORIES",)
_BATH_BED = ("BATH_BED",)

CATEGORY_KEYWORDS = MappingProxyType({
    # Roupa
    "bodie": _CLOTHES,
    "bodies": _CLOTHES,
    "body": _CLOTHES,
    "t-shirt": _CLOTHES,
    "tshirt": _CLOTHES,
    "t shirt": _CLOTHES,
    "calça": _CLOTHES,
    "calças": _CLOTHES,
    "calção": _CLOTHES,
    "calções": _CLOTHES,
    "casaco": _CLOTHES,
    "casacos": _CLOTHES,
    "camisola": _CLOTHES,
    "camisolas": _CLOTHES,
    "pijama": _CLOTHES,
    "pijamas": _CLOTHES,

    # Sapatos
    "sapato": _SHOES,
    "sapatos": _SHOES,
    "ténis": _SHOES,
    "tenis": _SHOES,
    "sandália": _SHOES,
    "sandálias": _SHOES,
    "sandalia": _SHOES,
    "sandalias": _SHOES,

    # Acessórios
    "meia": _ACCESSORIES,
    "meias": _ACCESSORIES,
    "gorro": _ACCESSORIES,
    "gorros": _ACCESSORIES,
    "chapéu": _ACCESSORIES,
    "chapéus": _ACCESSORIES,
    "chapeu": _ACCESSORIES,
    "chapeus": _ACCESSORIES,

    # Banho/Cama
    "toalha": _BATH_BED,
    "toalhas": _BATH_BED,
    "lençol": _BATH_BED,
    "lençóis": _BATH_BED,
    "lencol": _BATH_BED,
    "lencois": _BATH_BED,
})

# =============================================================================
# SUBCATEGORIES
# =============================================================================
_ALL_BODIES = ("BODIES_SHORT", "BODIES_LONG", "BODIES_SLEEVELESS")
_ALL_TSHIRTS = ("TSHIRTS_SHORT", "TSHIRTS_LONG", "TSHIRTS_SLEEVELESS")
_ALL_PANTS = ("PANTS_SPORTSWEAR", "PANTS_LEGGINGS", "PANTS_DENIM", "PANTS_CHINO", "PANTS_FABRIC")

# The bare "bodie" entry precedes the qualified "bodie curto" / "bodie comprido" /
# "bodie sem mangas" entries, so a query naming a qualified bodie still resolves
# to all three bodie subcategories.
SUBCATEGORY_KEYWORDS = MappingProxyType({
    "bodie": _ALL_BODIES,
    "bodies": _ALL_BODIES,
    "body": _ALL_BODIES,
    "bodie curto": ("BODIES_SHORT",),
    "bodie comprido": ("BODIES_LONG",),
    "bodie sem mangas": ("BODIES_SLEEVELESS",),
    "t-shirt": _ALL_TSHIRTS,
    "tshirt": _ALL_TSHIRTS,
    "t shirt": _ALL_TSHIRTS,
    "calça": _ALL_PANTS,
    "calças": _ALL_PANTS,
    "calção": ("SHORTS",),
    "calções": ("SHORTS",),
    "ténis": ("SNEAKERS",),
    "tenis": ("SNEAKERS",),
    "sandália": ("SANDALS",),
    "sandálias": ("SANDALS",),
    "sandalia": ("SANDALS",),
    "sandalias": ("SANDALS",),
    "meia": ("SOCKS",),
    "meias": ("SOCKS",),
    "gorro": ("HAT",),
    "gorros": ("HAT",),
    "chapéu": ("CAP",),
    "chapéus": ("CAP",),
    "chapeu": ("CAP",),
    "chapeus": ("CAP",),
    "toalha": ("TOWEL",),
    "toalhas": ("TOWEL",),
    "lençol": ("SHEETS",),
    "lençóis": ("SHEETS",),
    "lencol": ("SHEETS",),
    "lencois": ("SHEETS",),
})

# =============================================================================
# COLORS
# =============================================================================
COLOR_KEYWORDS = (
    # Basic
    "azul", "vermelho", "verde", "amarelo", "branco", "preto", "rosa", "roxo",
    "laranja", "cinza", "cinzento", "bege", "marrom", "castanho", "dourado",
    "prateado",

    # Shades
    "azul claro", "azul escuro", "verde claro", "verde escuro",
    "rosa claro", "rosa escuro", "vermelho claro", "vermelho escuro",
    "amarelo claro", "amarelo escuro", "laranja claro", "laranja escuro",
    "roxo claro", "roxo escuro", "cinza claro", "cinza escuro",
    "azul marinho", "verde oliva",

    # Named
    "coral", "salmon", "turquesa", "magenta", "ciano", "lilás", "lavanda",
    "pêssego", "creme", "ivory", "champagne", "caramelo", "chocolate", "café",
)

# =============================================================================
# SIZE PATTERNS
# =============================================================================
SIZE_PATTERNS = (
    re.compile(r'(\d+)\s*a\s*(\d+)\s*meses?', re.IGNORECASE),
    re.compile(r'(\d+)\s*-\s*(\d+)\s*meses?', re.IGNORECASE),
    re.compile(r'(\d+)\s*a\s*(\d+)\s*m', re.IGNORECASE),
    re.compile(r'(\d+)\s*-\s*(\d+)\s*m', re.IGNORECASE),
    re.compile(r'recém\s*-?\s*nascido', re.IGNORECASE),
    re.compile(r'recem\s*-?\s*nascido', re.IGNORECASE),
    re.compile(r'(\d+)\s*anos?', re.IGNORECASE),
    re.compile(r'(\d+)\s*meses?', re.IGNORECASE),
    re.compile(r'tamanho\s*(\d+)', re.IGNORECASE),
    re.compile(r't\.?\s*(\d+)', re.IGNORECASE),
    re.compile(r'(\d+)\s*cm', re.IGNORECASE),
)
