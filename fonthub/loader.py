"""
Metadata Loader

Walks a metadata directory recursively, decodes every ``*.json`` document
into a ``FontMetadata`` record and builds a fresh ``FontStore`` plus
``AttributeIndex`` from the result.

Failure policy:
  * strict   — the first unreadable or malformed document aborts the load
               and the error propagates to the caller.
  * lenient  — (default) bad documents are logged, recorded in the report
               and skipped; the remaining documents still load.

Duplicate names: the document loaded later (lexical path order) replaces the
earlier record. Indices are built from the final store contents, so nothing
of the replaced record remains indexed.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

from loguru import logger

from .index import AttributeIndex
from .models import FontMetadata
from .store import FontStore

METADATA_SUFFIX = ".json"


class MetadataLoadError(RuntimeError):
    """A metadata directory or document could not be loaded."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


@dataclass
class LoadReport:
    """Outcome of one load: the built state plus what happened on the way."""

    store: FontStore
    index: AttributeIndex
    files_seen: int = 0
    loaded: int = 0
    duplicates: List[str] = field(default_factory=list)
    errors: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> dict:
        return {
            "files_seen": self.files_seen,
            "loaded": self.loaded,
            "fonts": len(self.store),
            "duplicates": list(self.duplicates),
            "errors": [{"path": str(p), "reason": r} for p, r in self.errors],
        }


def discover_documents(root: Union[str, Path]) -> List[Path]:
    """All metadata documents under ``root``, in lexical path order."""
    root = Path(root)
    if not root.exists():
        raise MetadataLoadError(root, "metadata directory does not exist")
    if not root.is_dir():
        raise MetadataLoadError(root, "metadata path is not a directory")
    return sorted(
        p for p in root.rglob(f"*{METADATA_SUFFIX}") if p.is_file()
    )


def parse_document(path: Union[str, Path]) -> FontMetadata:
    """Read and decode one metadata document."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MetadataLoadError(path, f"unreadable: {exc}") from exc

    try:
        return FontMetadata.model_validate(json.loads(text))
    except ValueError as exc:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        raise MetadataLoadError(path, f"malformed: {exc}") from exc


def load_metadata(root: Union[str, Path], strict: bool = False) -> LoadReport:
    """
    Load every metadata document under ``root``.

    Args:
        root:   Directory containing the metadata set (searched recursively).
        strict: Abort on the first bad document instead of skipping it.

    Returns:
        LoadReport holding the new store and index.

    Raises:
        MetadataLoadError: ``root`` is missing, or ``strict`` and a document
            failed to load.
    """
    store = FontStore()
    errors: List[Tuple[Path, str]] = []
    duplicates: List[str] = []
    loaded = 0

    try:
        paths = discover_documents(root)
    except MetadataLoadError as exc:
        logger.error(f"Cannot load font metadata: {exc}")
        raise

    logger.info(f"Loading font metadata from {root} ({len(paths)} documents)")

    for path in paths:
        logger.debug(f"Loading metadata file: {path}")
        try:
            record = parse_document(path)
        except MetadataLoadError as exc:
            if strict:
                logger.error(f"Aborting metadata load: {exc}")
                raise
            logger.warning(f"Skipped metadata file {path}: {exc.reason}")
            errors.append((path, exc.reason))
            continue

        if store.put(record) is not None:
            logger.warning(f"Duplicate font name {record.name!r}: {path} replaces earlier record")
            duplicates.append(record.name)
        loaded += 1

    index = AttributeIndex.from_records(store.all())

    logger.info(
        f"Font metadata loaded: {len(store)} fonts from {loaded} documents "
        f"({len(errors)} skipped, {len(duplicates)} duplicates)"
    )
    return LoadReport(
        store=store,
        index=index,
        files_seen=len(paths),
        loaded=loaded,
        duplicates=duplicates,
        errors=errors,
    )
