"""
Text helpers shared by the indexer and the search engine.
"""
import re
import hashlib
import json
import unicodedata
from typing import Any, Iterable, Mapping

# Combining diacritical marks left behind by NFD decomposition
_RX_DIACRITICS = re.compile(r'[\u0300-\u036f]')
_RX_TOKEN_SPLIT = re.compile(r'[^a-z0-9.]+')


def to_text(value: Any) -> str:
    """Render a cell value as text; integral floats drop the ".0" (10.0 -> "10")."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_text(value: Any) -> str:
    """
    Fold a raw value into the canonical form used for every comparison.

    - falsy values (None, "", 0) -> ""
    - accents stripped ("café" -> "cafe")
    - comma as decimal point ("3,5" -> "3.5")
    - lowercased and trimmed; internal whitespace is kept
    """
    if not value:
        return ""
    text = unicodedata.normalize('NFD', to_text(value))
    text = _RX_DIACRITICS.sub('', text)
    return text.replace(',', '.').lower().strip()


def tokenize(text: str) -> list[str]:
    """Split normalized text on anything that is not a-z, 0-9 or a period."""
    return [t for t in _RX_TOKEN_SPLIT.split(text or "") if t]


def _with_text_keys(value: Any) -> Any:
    # Spreadsheet rows may mix int column keys with str keys
    if isinstance(value, Mapping):
        return {str(k): _with_text_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_with_text_keys(v) for v in value]
    return value


def catalog_fingerprint(records: Iterable[Any]) -> str:
    """
    SHA256 over the serialized records, used to detect catalog changes.
    """
    digest = hashlib.sha256()
    for record in records:
        if hasattr(record, 'model_dump'):
            record = record.model_dump()
        payload = json.dumps(_with_text_keys(record), sort_keys=True, default=str, ensure_ascii=False)
        digest.update(payload.encode('utf-8'))
        digest.update(b'\n')
    return digest.hexdigest()
