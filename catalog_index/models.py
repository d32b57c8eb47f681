"""
Pydantic v2 models for catalog records and the derived search model.
"""
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
import pytz
from .utils import to_text


class CatalogRecord(BaseModel):
    """One product/SKU as supplied by an import or a stored-items fetch."""
    model_config = ConfigDict(extra="allow")

    id: str = ""
    description: str = ""

    @field_validator("id", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        # Spreadsheet imports hand over numeric codes and empty cells
        return to_text(value)

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Fields passed through from the source record."""
        return dict(self.model_extra or {})


class DimensionInfo(BaseModel):
    """Dimension tuple extracted from a description (e.g. 10x20x1.5)."""
    dimensions: list[float]
    thickness: float


class IndexedItem(CatalogRecord):
    """Catalog record enriched with the derived search facets."""
    model_config = ConfigDict(extra="allow", frozen=True)

    family: str
    search_text: str
    dimensions: Optional[list[float]] = None
    thickness: Optional[float] = None


class DuplicateIdsWarning(BaseModel):
    """Diagnostic emitted when a catalog repeats record ids."""
    catalog_name: str
    ids: list[str]


class CatalogModel(BaseModel):
    """Immutable, queryable view of one catalog load."""
    model_config = ConfigDict(frozen=True)

    name: str
    items: list[IndexedItem] = Field(default_factory=list)
    by_id: dict[str, int] = Field(default_factory=dict)  # last occurrence wins
    token_index: dict[str, list[int]] = Field(default_factory=dict)
    families: list[str] = Field(default_factory=list)
    duplicates: list[str] = Field(default_factory=list)
    built_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def get_item(self, item_id: Any) -> Optional[IndexedItem]:
        """Return the last item registered under `item_id`, if any."""
        index = self.by_id.get(to_text(item_id))
        if index is None:
            return None
        return self.items[index]

    def summary(self) -> dict:
        """Row-like summary for operator screens."""
        # Shown to operators in Brazil
        sao_paulo_tz = pytz.timezone('America/Sao_Paulo')
        local_time = self.built_at.astimezone(sao_paulo_tz)
        family_counts = Counter(item.family for item in self.items)

        return {
            "Catalog": self.name,
            "Items": len(self.items),
            "Families": {family: family_counts[family] for family in self.families},
            "Duplicated_Ids": len(self.duplicates),
            "Built_At": local_time.strftime('%d/%m/%y %H:%M:%S'),
        }
