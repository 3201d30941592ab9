"""
Answer synthesis from a matched document's payload.

Q&A records carry an authoritative ``response``. Structured records are
rendered from a per-type field layout; unknown types fall back to the raw
document text.
"""

from typing import Any, Dict, List, Optional, Tuple

from vcompass.index import Document

# (label, payload keys tried in order); an empty label renders the bare value.
FieldLayout = List[Tuple[str, Tuple[str, ...]]]

FIELD_LAYOUTS: Dict[str, FieldLayout] = {
    "professor": [
        ("", ("name",)),
        ("Cabin", ("cabin", "cabinNumber")),
        ("Department", ("department",)),
        ("Email", ("email",)),
    ],
    "office": [
        ("", ("name",)),
        ("Location", ("location",)),
        ("Floor", ("floor",)),
        ("Room", ("room",)),
        ("Email", ("email",)),
    ],
    "department": [
        ("", ("name",)),
        ("Email", ("email",)),
        ("Phone", ("phone",)),
        ("Location", ("location",)),
    ],
}

SEPARATOR = " | "


def _first_present(payload: Dict[str, Any], keys: Tuple[str, ...]) -> Optional[Any]:
    for key in keys:
        value = payload.get(key)
        if value:
            return value
    return None


def synthesize(document: Document) -> str:
    payload = document.payload or {}

    response = payload.get("response")
    if isinstance(response, str) and response.strip():
        return response.strip()

    layout = FIELD_LAYOUTS.get(document.type)
    if layout is None:
        return document.text

    parts = []
    for label, keys in layout:
        value = _first_present(payload, keys)
        if value is None:
            continue
        parts.append(f"{label}: {value}" if label else str(value))

    return SEPARATOR.join(parts) or document.text
