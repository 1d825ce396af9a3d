"""
Ingredient Normalizer

Cleans raw ingredient strings (from label detection, manual entry or the
recipe generator) into canonical lookup strings for the price table.

- "200g chicken breast" -> "chicken breast"
- "2 tbsp Olive Oil"    -> "olive oil"
- "1/2 cup rice"        -> "rice"

Matching tolerance lives in the price table (substring containment), so this
module never singularizes, deduplicates or spell-corrects.
"""

import re
from typing import Iterable, List


# Units stripped when they directly follow a quantity
STRIPPED_UNITS = (
    "kg", "g", "ml", "l", "oz", "lbs", "lb",
    "cups", "cup", "tbsp", "tsp",
    "pieces", "piece", "slices", "slice",
)

# Quantity is an integer, a decimal ("1.5") or a simple fraction ("1/2").
# The unit must end at a word boundary so "2 garlic" and "2 large eggs" survive.
QUANTITY_UNIT_PATTERN = re.compile(
    r"\d+(?:[./]\d+)?\s*(?:" + "|".join(STRIPPED_UNITS) + r")\b",
    re.IGNORECASE,
)


def normalize(raw: str) -> str:
    """Lowercase, strip quantity/unit tokens and trim a single ingredient."""
    cleaned = raw.lower()

    # Removing one token can expose another ("1 2 cup g rice"), so repeat
    # until stable to keep normalize(normalize(s)) == normalize(s).
    while True:
        stripped = QUANTITY_UNIT_PATTERN.sub("", cleaned)
        if stripped == cleaned:
            break
        cleaned = stripped

    return cleaned.strip()


def normalize_list(raws: Iterable[str]) -> List[str]:
    """Normalize every element. Empties are kept; callers filter them."""
    return [normalize(raw) for raw in raws]


def clean_manual_ingredients(raws: Iterable[str]) -> List[str]:
    """Manual-entry path: trim, lowercase and drop blank entries."""
    cleaned = []
    for raw in raws:
        if not isinstance(raw, str):
            continue
        item = raw.strip().lower()
        if item:
            cleaned.append(item)
    return cleaned
