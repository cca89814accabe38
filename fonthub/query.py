"""
Selector Query Engine

Combines the per-family inverted indices: union of the listed values within
a family, intersection across constrained families. Read-only with respect
to the store and index.
"""

from typing import List, Optional, Set

from .index import AttributeIndex
from .models import FontMetadata, FontSelector
from .store import FontStore


def match_names(selector: FontSelector, store: FontStore, index: AttributeIndex) -> Set[str]:
    """Names of the fonts matching ``selector``."""
    matches: Optional[Set[str]] = None

    for family, values in selector.constraints():
        family_matches = index.family(family).union(values)
        if matches is None:
            matches = family_matches
        else:
            matches &= family_matches
        if not matches:
            # Nothing left to intersect
            return set()

    if matches is None:
        return set(store.names())
    return matches


def match(selector: FontSelector, store: FontStore, index: AttributeIndex) -> List[FontMetadata]:
    """
    Fonts matching ``selector``, sorted by name.

    A name present in the index but missing from the store is skipped.
    """
    results = []
    for name in sorted(match_names(selector, store, index)):
        record = store.get(name)
        if record is not None:
            results.append(record)
    return results
