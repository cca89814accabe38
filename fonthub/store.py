"""
Record Store — font name -> FontMetadata, the source of truth for lookups.
"""

from typing import Dict, List, Optional

from .models import FontMetadata


class FontStore:
    """In-memory mapping of unique font name to its record."""

    def __init__(self) -> None:
        self._by_name: Dict[str, FontMetadata] = {}

    def put(self, record: FontMetadata) -> Optional[FontMetadata]:
        """Store ``record`` by name. Returns the record it replaced, if any."""
        previous = self._by_name.get(record.name)
        self._by_name[record.name] = record
        return previous

    def get(self, name: str) -> Optional[FontMetadata]:
        return self._by_name.get(name)

    def all(self) -> List[FontMetadata]:
        """Every stored record. Order is not part of the contract."""
        return list(self._by_name.values())

    def by_category(self, category: str) -> List[FontMetadata]:
        """Records whose categories contain ``category`` (linear scan)."""
        return [r for r in self._by_name.values() if category in r.categories]

    def names(self) -> List[str]:
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        return f"FontStore({len(self)} fonts)"
