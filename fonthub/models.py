"""
Data Models for FontHub

One ``FontMetadata`` record per font, decoded from a JSON document in the
metadata set, plus the transient ``FontSelector`` used to query the index.
"""

from typing import Dict, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Attribute families
# ---------------------------------------------------------------------------

# Processing order for selector matching.
ATTRIBUTE_FAMILIES: Tuple[str, ...] = ("width", "weight", "style", "language")

FAMILY_FIELDS: Dict[str, str] = {
    "width": "widths",
    "weight": "weights",
    "style": "styles",
    "language": "languages",
}


def family_field(family: str) -> str:
    """Return the record/selector field name for an attribute family."""
    try:
        return FAMILY_FIELDS[family]
    except KeyError:
        raise KeyError(f"Unknown attribute family: {family!r}") from None


# ---------------------------------------------------------------------------
# Font records
# ---------------------------------------------------------------------------

class FontsFiles(BaseModel):
    """Where the font's files can be fetched from."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    link: str = Field("", description="Download link")
    path: str = Field("", description="Storage path")

    @field_validator("link", "path", mode="before")
    @classmethod
    def _null_to_empty(cls, v):
        return "" if v is None else v


class FontMetadata(BaseModel):
    """
    Metadata for one font, keyed by its unique name.

    Label fields are tuples so a loaded record cannot drift away from the
    indices built over it; they still serialise as JSON arrays.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., description="Unique font name (primary key)")
    license: str = Field("", description="License identifier, e.g. 'OFL-1.1'")
    version: str = Field("", description="Version string")
    categories: Tuple[str, ...] = Field((), description="Category labels")
    widths: Tuple[str, ...] = Field((), description="Width labels")
    weights: Tuple[str, ...] = Field((), description="Weight labels")
    styles: Tuple[str, ...] = Field((), description="Style labels")
    languages: Tuple[str, ...] = Field((), description="Supported languages")
    source: str = Field("", description="Where the font comes from")
    fonts_files: FontsFiles = Field(default_factory=FontsFiles, alias="fontsFiles")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    @field_validator("license", "version", "source", mode="before")
    @classmethod
    def _null_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("categories", "widths", "weights", "styles", "languages", mode="before")
    @classmethod
    def _null_to_tuple(cls, v):
        return () if v is None else v

    @field_validator("fonts_files", mode="before")
    @classmethod
    def _null_to_files(cls, v):
        return FontsFiles() if v is None else v

    def values_for(self, family: str) -> Tuple[str, ...]:
        """Return this font's values for an attribute family."""
        return getattr(self, family_field(family))

    def to_dict(self) -> dict:
        """Serialise to the public JSON shape (``fontsFiles`` nested)."""
        return self.model_dump(by_alias=True, mode="json")

    def __str__(self) -> str:
        return f"{self.name} ({self.license or 'no license'}, v{self.version or '?'})"


# ---------------------------------------------------------------------------
# Selector
# ---------------------------------------------------------------------------

class FontSelector(BaseModel):
    """
    Search criteria for fonts.

    Values within one family are OR-ed, non-empty families are AND-ed.
    A selector with every family empty matches every font.
    """

    widths: List[str] = Field(default_factory=list)
    weights: List[str] = Field(default_factory=list)
    styles: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)

    def values_for(self, family: str) -> List[str]:
        return getattr(self, family_field(family))

    def constraints(self) -> Iterator[Tuple[str, List[str]]]:
        """Yield ``(family, values)`` for each constrained family, in family order."""
        for family in ATTRIBUTE_FAMILIES:
            values = self.values_for(family)
            if values:
                yield family, values

    def is_empty(self) -> bool:
        return not any(True for _ in self.constraints())
