"""
Attribute Index — inverted indices over the selector's attribute families.

One ``InvertedIndex`` per family (width, weight, style, language) maps an
attribute value to the set of font names that list it. Values are matched
exactly and case-sensitively. The index is derived data: it is built
wholesale from a ``FontStore`` on every load and never patched afterwards.
"""

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List, Set

from .models import ATTRIBUTE_FAMILIES, FontMetadata


class InvertedIndex:
    """Mapping of attribute value -> font names for a single family."""

    def __init__(self, family: str) -> None:
        self.family = family
        self._postings: Dict[str, Set[str]] = defaultdict(set)

    def add(self, value: str, name: str) -> None:
        self._postings[value].add(name)

    def lookup(self, value: str) -> FrozenSet[str]:
        """Names indexed under ``value``; empty if the value was never seen."""
        names = self._postings.get(value)
        return frozenset(names) if names else frozenset()

    def union(self, values: Iterable[str]) -> Set[str]:
        """Names matching any of ``values`` (OR within the family)."""
        result: Set[str] = set()
        for value in values:
            names = self._postings.get(value)
            if names:
                result |= names
        return result

    def values(self) -> List[str]:
        return sorted(self._postings)

    def counts(self) -> Dict[str, int]:
        """Number of fonts per value, most common first."""
        ranked = sorted(self._postings.items(), key=lambda kv: (-len(kv[1]), kv[0]))
        return {value: len(names) for value, names in ranked}

    def __contains__(self, value: object) -> bool:
        return value in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    def __repr__(self) -> str:
        return f"InvertedIndex({self.family!r}, {len(self)} values)"


class AttributeIndex:
    """The four per-family inverted indices, fed one record at a time."""

    def __init__(self) -> None:
        self._families: Dict[str, InvertedIndex] = {
            family: InvertedIndex(family) for family in ATTRIBUTE_FAMILIES
        }

    @classmethod
    def from_records(cls, records: Iterable[FontMetadata]) -> "AttributeIndex":
        index = cls()
        for record in records:
            index.add_record(record)
        return index

    def add_record(self, record: FontMetadata) -> None:
        for family, inverted in self._families.items():
            for value in record.values_for(family):
                inverted.add(value, record.name)

    def family(self, family: str) -> InvertedIndex:
        try:
            return self._families[family]
        except KeyError:
            raise KeyError(f"Unknown attribute family: {family!r}") from None

    def lookup(self, family: str, value: str) -> FrozenSet[str]:
        return self.family(family).lookup(value)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{f}={len(i)}" for f, i in self._families.items())
        return f"AttributeIndex({sizes})"
