"""
Catalog search: inverted-index intersection with a substring fallback.
"""
import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence
from .indexer import intersect_indexes
from .models import CatalogModel, IndexedItem
from .utils import normalize_text, to_text, tokenize

logger = logging.getLogger(__name__)

ALL_FAMILIES = "ALL"


def _family_filter_active(family_filter: Optional[str]) -> bool:
    return bool(family_filter) and family_filter != ALL_FAMILIES


def search_catalog(
    model: Optional[CatalogModel],
    search_term: Optional[str],
    family_filter: Optional[str] = None,
) -> List[IndexedItem]:
    """
    Return the items matching every token of `search_term`.

    - No model -> []
    - Empty term -> every item of the selected family (or all items)
    - Any query token missing from the index -> substring scan over search_text
    - Otherwise posting lists are intersected and re-checked by substring

    Results come back in catalog order.
    """
    if model is None:
        return []

    filtering = _family_filter_active(family_filter)
    if filtering:
        base_items = [item for item in model.items if item.family == family_filter]
    else:
        base_items = list(model.items)

    normalized = normalize_text(search_term)
    if not normalized:
        return base_items

    tokens = tokenize(normalized)
    indexed_lists = [model.token_index[t] for t in tokens if t in model.token_index]

    if len(indexed_lists) < len(tokens) or not indexed_lists:
        logger.debug(f"[{model.name}] Fallback scan for {normalized!r} ({len(indexed_lists)}/{len(tokens)} tokens indexed)")
        return [item for item in base_items if normalized in item.search_text]

    indexes = intersect_indexes(indexed_lists)
    if not indexes:
        return []

    results = [
        model.items[idx] for idx in indexes
        if normalized in model.items[idx].search_text
    ]

    if filtering:
        results = [item for item in results if item.family == family_filter]

    return results


def global_search(
    items: Sequence[Any],
    search_term: Optional[str],
    fields: Optional[Iterable[Any]] = None,
) -> List[Any]:
    """
    Plain substring search over stored items shaped like {id, data: {...}}.

    The haystack is the item id plus the values of `item.data`: only the
    schema `fields` when given (names, or dicts with "key"/"name"), every
    value otherwise. Falsy values are skipped. Keys are never searched.
    """
    if not search_term or not search_term.strip():
        return list(items)

    normalized = normalize_text(search_term)
    field_keys = [_field_key(f) for f in fields] if fields else None

    return [item for item in items if normalized in _haystack(item, field_keys)]


def _field_key(field: Any) -> Optional[str]:
    if isinstance(field, Mapping):
        return field.get('key') or field.get('name')
    return field


def _haystack(item: Any, field_keys: Optional[List[Optional[str]]]) -> str:
    if isinstance(item, Mapping):
        item_id, data = item.get('id'), item.get('data')
    else:
        item_id, data = getattr(item, 'id', None), getattr(item, 'data', None)
    if hasattr(data, 'model_dump'):
        data = data.model_dump()
    data = data if isinstance(data, Mapping) else {}

    if field_keys:
        values = [data.get(k) for k in field_keys if k]
    else:
        values = list(data.values())
    parts = [to_text(v) for v in [item_id, *values] if v]
    return normalize_text(' '.join(parts))
