"""
Builds the in-memory catalog model used by the search engine.
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional
from .extractors import classify_family, extract_dimensions
from .indexer import index_tokens
from .models import CatalogModel, CatalogRecord, DuplicateIdsWarning, IndexedItem
from .settings import settings
from .utils import normalize_text

logger = logging.getLogger(__name__)


def _as_record(raw: Any) -> CatalogRecord:
    if isinstance(raw, CatalogRecord):
        return raw
    if isinstance(raw, Mapping):
        return CatalogRecord(**{str(k): v for k, v in raw.items()})
    # Objects exposing id/description as attributes
    return CatalogRecord(
        id=getattr(raw, 'id', None),
        description=getattr(raw, 'description', None),
    )


def build_catalog_model(
    catalog: Optional[Iterable[Any]],
    catalog_name: Optional[str] = None,
    on_duplicates: Optional[Callable[[DuplicateIdsWarning], None]] = None,
) -> CatalogModel:
    """
    Build the search model for a catalog.

    Every record is kept, in input order; its position is its index in
    `items`, `by_id` and `token_index`. Repeated ids point `by_id` at the
    last occurrence and are reported (log warning and `on_duplicates`)
    without aborting the build.

    Args:
        catalog: records as dicts or CatalogRecord instances (None -> empty)
        catalog_name: label used in diagnostics (defaults to CATALOG_DEFAULT_NAME)
        on_duplicates: optional callback receiving a DuplicateIdsWarning
    """
    name = catalog_name or settings.DEFAULT_CATALOG_NAME
    by_id: Dict[str, int] = {}
    duplicates: Dict[str, None] = {}
    token_index: Dict[str, List[int]] = {}
    items: List[IndexedItem] = []

    for index, raw in enumerate(catalog or []):
        record = _as_record(raw)

        if record.id in by_id:
            duplicates[record.id] = None
        by_id[record.id] = index

        search_text = normalize_text(f"{record.id} {record.description}")
        dims = extract_dimensions(record.description)
        index_tokens(token_index, search_text, index)

        items.append(IndexedItem(**{
            **record.model_dump(),
            'family': classify_family(record.description),
            'search_text': search_text,
            'dimensions': dims.dimensions if dims else None,
            'thickness': dims.thickness if dims else None,
        }))

    duplicate_ids = list(duplicates)
    if duplicate_ids:
        _report_duplicates(name, duplicate_ids, on_duplicates)

    families = sorted({item.family for item in items})
    logger.debug(f"[{name}] Built model: {len(items)} items, {len(token_index)} tokens, families={families}")

    return CatalogModel(
        name=name,
        items=items,
        by_id=by_id,
        token_index=token_index,
        families=families,
        duplicates=duplicate_ids,
    )


def _report_duplicates(
    name: str,
    duplicate_ids: List[str],
    on_duplicates: Optional[Callable[[DuplicateIdsWarning], None]],
) -> None:
    """Signal duplicated ids; never raises."""
    if settings.WARN_DUPLICATES:
        logger.warning(f"[catalog] Duplicated ids in {name}: {duplicate_ids}")

    if on_duplicates is None:
        return

    try:
        on_duplicates(DuplicateIdsWarning(catalog_name=name, ids=duplicate_ids))
    except Exception as e:
        logger.warning(f"[{name}] Duplicate-id callback failed: {e}")
