"""Income statement classification of outflow entries.

Categories are matched by name: the first keyword table containing a
substring of the (case-folded) category name decides the bucket. Deduction
keywords are always checked before cost keywords.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from cashbook.domain.entities import Category, DreBucket, LedgerEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationKeywords:
    """Keyword tables used to classify outflow categories."""

    deduction: tuple[str, ...]
    cost: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "deduction", _normalize(self.deduction))
        object.__setattr__(self, "cost", _normalize(self.cost))


def _normalize(keywords: Iterable[str]) -> tuple[str, ...]:
    return tuple(k.strip().casefold() for k in keywords if k and k.strip())


DEFAULT_KEYWORDS = ClassificationKeywords(
    deduction=("imposto", "taxa", "dedução", "tributo"),
    cost=("custo", "matéria", "produto", "insumo", "mercadoria"),
)


def classify_category_name(
    name: Optional[str], keywords: ClassificationKeywords = DEFAULT_KEYWORDS
) -> DreBucket:
    """Classify an outflow category name into a statement bucket."""
    if not name:
        return DreBucket.OPERATING_EXPENSE

    folded = name.casefold()
    if any(k in folded for k in keywords.deduction):
        return DreBucket.DEDUCTION
    if any(k in folded for k in keywords.cost):
        return DreBucket.COST
    return DreBucket.OPERATING_EXPENSE


def classify(
    entry: LedgerEntry,
    category: Optional[Category],
    keywords: ClassificationKeywords = DEFAULT_KEYWORDS,
) -> DreBucket:
    """Classify a ledger entry into an income statement bucket.

    Only settled outflows are classified; every other entry maps to
    ``DreBucket.NONE``. The entry's own kind decides applicability, so a
    category of the wrong kind is still matched by name.

    Args:
        entry: Entry to classify
        category: The entry's category, or None when uncategorized or unknown
        keywords: Keyword tables to match against

    Returns:
        Bucket the entry's amount belongs to
    """
    if not entry.is_outflow or not entry.is_settled:
        return DreBucket.NONE

    if category is not None and category.kind != entry.kind:
        logger.warning(
            "Entry %s is an %s entry but category %s (%r) is %s; classifying by entry kind",
            entry.id,
            entry.kind.value,
            category.id,
            category.name,
            category.kind.value,
        )

    return classify_category_name(category.name if category else None, keywords)
