"""
In-memory catalog search: normalization, family/dimension extraction,
token index and multi-token AND search.
"""
from .builder import build_catalog_model
from .extractors import DEFAULT_FAMILY, FAMILIES, FAMILY_RULES, classify_family, extract_dimensions
from .models import CatalogModel, CatalogRecord, DimensionInfo, DuplicateIdsWarning, IndexedItem
from .search import ALL_FAMILIES, global_search, search_catalog
from .utils import normalize_text, tokenize

__all__ = [
    "ALL_FAMILIES",
    "DEFAULT_FAMILY",
    "FAMILIES",
    "FAMILY_RULES",
    "CatalogModel",
    "CatalogRecord",
    "DimensionInfo",
    "DuplicateIdsWarning",
    "IndexedItem",
    "build_catalog_model",
    "classify_family",
    "extract_dimensions",
    "global_search",
    "normalize_text",
    "search_catalog",
    "tokenize",
]
