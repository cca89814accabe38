"""Shared fixtures: small on-disk metadata sets."""

import pytest

from fonthub.database import FontDatabase
from helpers import SAMPLE_FONTS, write_doc


@pytest.fixture
def metadata_dir(tmp_path):
    """Sample fonts spread over nested directories, plus a non-JSON file."""
    root = tmp_path / "metadataset"
    for i, doc in enumerate(SAMPLE_FONTS):
        sub = "sans" if "sans-serif" in doc["categories"] else "other"
        write_doc(root / sub, f"{i:02d}-{doc['name'].replace(' ', '_')}.json", doc)
    write_doc(root, "README.md", "# not metadata\n")
    return root


@pytest.fixture
def database(metadata_dir):
    db = FontDatabase(metadata_dir)
    db.load()
    return db
