"""
Holds one built model per catalog so searches reuse it until the catalog changes.
"""
import logging
from collections import OrderedDict
from typing import Any, Callable, Iterable, List, Optional, Tuple
from .builder import build_catalog_model
from .models import CatalogModel, DuplicateIdsWarning, IndexedItem
from .search import search_catalog
from .settings import settings
from .utils import catalog_fingerprint

logger = logging.getLogger(__name__)


class InMemoryCatalogStore:
    """In-memory models keyed by catalog name, least recently loaded evicted first."""

    def __init__(self, max_catalogs: Optional[int] = None):
        self.max_catalogs = max_catalogs or settings.STORE_MAX_CATALOGS
        self.store: "OrderedDict[str, Tuple[str, CatalogModel]]" = OrderedDict()

    def get(self, name: str) -> Optional[CatalogModel]:
        entry = self.store.get(name)
        return entry[1] if entry else None

    def load(
        self,
        name: str,
        records: Iterable[Any],
        on_duplicates: Optional[Callable[[DuplicateIdsWarning], None]] = None,
    ) -> CatalogModel:
        """Return the cached model when the records are unchanged, else rebuild."""
        records = list(records or [])
        fingerprint = catalog_fingerprint(records)

        entry = self.store.get(name)
        if entry and entry[0] == fingerprint:
            logger.debug(f"[{name}] Catalog unchanged, reusing model")
            self.store.move_to_end(name)
            return entry[1]

        model = build_catalog_model(records, name, on_duplicates=on_duplicates)
        self.store[name] = (fingerprint, model)
        self.store.move_to_end(name)
        logger.info(f"[{name}] Catalog loaded: {len(model.items)} items, families={model.families}")

        while len(self.store) > self.max_catalogs:
            evicted, _ = self.store.popitem(last=False)
            logger.info(f"Evicting catalog model: {evicted}")

        return model

    def delete(self, name: str) -> None:
        self.store.pop(name, None)

    def names(self) -> List[str]:
        return list(self.store)


# === Global Store Instance ===
_store: Optional[InMemoryCatalogStore] = None


def get_store() -> InMemoryCatalogStore:
    """Get or initialize the global store instance."""
    global _store

    if _store is None:
        _store = InMemoryCatalogStore()
        logger.info(f"Using in-memory catalog store (max {_store.max_catalogs} catalogs)")
    return _store


def load_catalog(
    name: str,
    records: Iterable[Any],
    on_duplicates: Optional[Callable[[DuplicateIdsWarning], None]] = None,
) -> CatalogModel:
    """Build (or reuse) the model for a catalog load."""
    return get_store().load(name, records, on_duplicates=on_duplicates)


def get_catalog_model(name: str) -> Optional[CatalogModel]:
    """Get the loaded model for a catalog."""
    return get_store().get(name)


def search_loaded_catalog(
    name: str,
    search_term: Optional[str],
    family_filter: Optional[str] = None,
) -> List[IndexedItem]:
    """Search a loaded catalog; an unknown catalog yields no results."""
    return search_catalog(get_catalog_model(name), search_term, family_filter)


def drop_catalog(name: str) -> None:
    """Forget a catalog's model."""
    get_store().delete(name)


def loaded_catalogs() -> List[str]:
    """Names of the catalogs currently held."""
    return get_store().names()
