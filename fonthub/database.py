"""
Font Database

Owns the loaded font set: a ``FontStore`` and its ``AttributeIndex``, held
together as one immutable snapshot. ``load()`` builds a complete new snapshot
and swaps it in under a lock, so queries running concurrently always see
either the old state or the new one, never a half-built index.
"""

import threading
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Union

from loguru import logger

from .index import AttributeIndex
from .loader import LoadReport, load_metadata
from .models import ATTRIBUTE_FAMILIES, FontMetadata, FontSelector
from .query import match
from .store import FontStore


class _Snapshot(NamedTuple):
    store: FontStore
    index: AttributeIndex


class FontDatabase:
    """
    Read-mostly font metadata database.

    Usage:
        db = FontDatabase("metadataset")
        db.load()
        db.get_by_selector(FontSelector(widths=["condensed"]))
    """

    def __init__(self, source_dir: Union[str, Path] = "metadataset", strict: bool = False) -> None:
        self.source_dir = Path(source_dir)
        self.strict = strict
        self._snapshot = _Snapshot(FontStore(), AttributeIndex())
        self._loaded = False
        self._lock = threading.Lock()  # serialises loads; readers never take it
        self.last_report: Optional[LoadReport] = None

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load(
        self,
        source_dir: Optional[Union[str, Path]] = None,
        strict: Optional[bool] = None,
    ) -> LoadReport:
        """
        Build the store and indices from the metadata directory.

        Args:
            source_dir: Overrides the directory given at construction.
            strict:     Overrides the construction-time failure policy.

        Raises:
            MetadataLoadError: see ``load_metadata``. The previous state is
                kept when the load fails.
        """
        root = Path(source_dir) if source_dir is not None else self.source_dir
        use_strict = self.strict if strict is None else strict

        with self._lock:
            report = load_metadata(root, strict=use_strict)
            self._snapshot = _Snapshot(report.store, report.index)
            self.source_dir = root
            self._loaded = True
            self.last_report = report
        return report

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def store(self) -> FontStore:
        return self._snapshot.store

    @property
    def index(self) -> AttributeIndex:
        return self._snapshot.index

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all(self) -> List[FontMetadata]:
        """Every loaded font."""
        return self._snapshot.store.all()

    def get_by_selector(self, selector: FontSelector) -> List[FontMetadata]:
        """Fonts matching all constrained families of ``selector``."""
        snapshot = self._snapshot
        return match(selector, snapshot.store, snapshot.index)

    def get_by_name(self, name: str) -> Optional[FontMetadata]:
        return self._snapshot.store.get(name)

    def get_by_category(self, category: str) -> List[FontMetadata]:
        return self._snapshot.store.by_category(category)

    def get_summary(self) -> Dict[str, Any]:
        """Counts per attribute value, category and license."""
        snapshot = self._snapshot
        categories: Counter = Counter()
        licenses: Counter = Counter()
        for font in snapshot.store.all():
            categories.update(font.categories)
            if font.license:
                licenses[font.license] += 1

        summary: Dict[str, Any] = {"total": len(snapshot.store)}
        for family in ATTRIBUTE_FAMILIES:
            summary[f"{family}s"] = snapshot.index.family(family).counts()
        summary["categories"] = dict(categories.most_common())
        summary["licenses"] = dict(licenses.most_common())
        return summary

    def __len__(self) -> int:
        return len(self._snapshot.store)

    def __repr__(self) -> str:
        status = f"{len(self)} fonts" if self._loaded else "not loaded"
        return f"FontDatabase({status}, path={self.source_dir})"


def open_database(source_dir: Union[str, Path], strict: bool = False) -> FontDatabase:
    """Create a database and load it in one step."""
    db = FontDatabase(source_dir, strict=strict)
    report = db.load()
    if not report.ok:
        logger.warning(f"{len(report.errors)} metadata documents could not be loaded")
    return db
