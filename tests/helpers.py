"""Builders for font metadata documents used across the tests."""

import json

from fonthub.models import FontMetadata


def font_doc(name, widths=None, weights=None, styles=None, languages=None,
             categories=None, license="OFL-1.1", version="1.000", source="google"):
    return {
        "name": name,
        "license": license,
        "version": version,
        "categories": categories or [],
        "widths": widths or [],
        "weights": weights or [],
        "styles": styles or [],
        "languages": languages or [],
        "source": source,
        "fontsFiles": {
            "link": f"https://fonts.example.com/{name}.zip",
            "path": f"fonts/{name}",
        },
    }


def make_font(name, **kwargs):
    return FontMetadata.model_validate(font_doc(name, **kwargs))


def write_doc(directory, filename, doc):
    path = directory / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(doc, str):
        path.write_text(doc, encoding="utf-8")
    else:
        path.write_text(json.dumps(doc), encoding="utf-8")
    return path


SAMPLE_FONTS = [
    font_doc("Roboto Condensed", widths=["condensed"], weights=["regular", "bold"],
             styles=["normal", "italic"], languages=["en", "fr"], categories=["sans-serif"]),
    font_doc("Noto Serif SC", widths=["normal"], weights=["regular", "black"],
             styles=["normal"], languages=["zh", "en"], categories=["serif"]),
    font_doc("Fira Code", widths=["normal"], weights=["light", "regular", "bold"],
             styles=["normal"], languages=["en"], categories=["monospace"]),
    font_doc("Archivo Narrow", widths=["condensed"], weights=["regular"],
             styles=["italic"], languages=["en", "de"], categories=["sans-serif"]),
    font_doc("Lora", widths=["normal"], weights=["regular", "bold"],
             styles=["normal", "italic"], languages=["en", "ru"], categories=["serif"]),
]


