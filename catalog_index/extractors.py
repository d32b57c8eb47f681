"""
Field extractors for product descriptions.
Derives the product family and the dimension tuple (e.g. 10x20x1.5).
"""
import re
import logging
from typing import Optional, Sequence, Tuple
from .models import DimensionInfo
from .utils import normalize_text

logger = logging.getLogger(__name__)


# === Family rules (first match wins) ===
# Specific phrases must come before their shorter prefixes ("perfil u").
FAMILY_RULES: Tuple[Tuple[str, str], ...] = (
    ("perfil us", "US"),
    ("perfil ue", "UE"),
    ("perfil u bandeja", "U BANDEJA"),
    ("perfil u porta", "U PORTA"),
    ("perfil u", "U"),
    ("chapa", "CHAPA"),
)

DEFAULT_FAMILY = "OUTROS"

FAMILIES = tuple(family for _, family in FAMILY_RULES) + (DEFAULT_FAMILY,)

# === Dimension Pattern: two or more numbers joined by "x" ===
DIMENSION_PATTERN = re.compile(r'(\d+(?:\.\d+)?(?:x\d+(?:\.\d+)?)+)')


def classify_family(description: str, rules: Sequence[Tuple[str, str]] = FAMILY_RULES) -> str:
    """Return the family of the first rule whose phrase appears in the description."""
    text = normalize_text(description)
    for pattern, family in rules:
        if pattern in text:
            return family
    return DEFAULT_FAMILY


def extract_dimensions(description: str) -> Optional[DimensionInfo]:
    """
    Extract the first dimension expression from a description.

    "Perfil US 10x20x1,5" -> dimensions [10.0, 20.0, 1.5], thickness 1.5.
    A bare number ("Parafuso M10") is not a dimension tuple and yields None.
    """
    text = normalize_text(description)
    match = DIMENSION_PATTERN.search(text)
    if not match:
        return None

    parts = []
    for raw in match.group(1).split('x'):
        try:
            parts.append(float(raw))
        except ValueError:
            logger.debug(f"Dropping unparsable dimension part: {raw!r}")

    if not parts:
        return None

    return DimensionInfo(dimensions=parts, thickness=parts[-1])
