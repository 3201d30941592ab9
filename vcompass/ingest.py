"""Campus data ingestion: turns category arrays into indexable records."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from vcompass.config import CAMPUS_DATA_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Category:
    key: str
    doc_type: str
    label: str
    fields: Tuple[Tuple[str, ...], ...] = ()
    qa_only: bool = False


STRUCTURED_CATEGORIES = [
    Category(
        "professors", "professor", "Professor",
        fields=(("name",), ("department",), ("cabin", "cabinNumber"), ("email",)),
    ),
    Category(
        "offices", "office", "Office",
        fields=(("name",), ("location",), ("room",), ("floor",), ("email",)),
    ),
    Category(
        "departments", "department", "Department",
        fields=(("name",), ("location",), ("email",), ("phone",)),
    ),
    Category("placement_training", "placement_training", "Placement/Training", qa_only=True),
]

ENTRIES_KEY = "entries"
KNOWN_KEYS = {c.key for c in STRUCTURED_CATEGORIES} | {ENTRIES_KEY}


def coalesce_text(values: Iterable[Any]) -> str:
    return " ".join(str(v) for v in values if v).strip()


def _first(item: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        if item.get(key):
            return item[key]
    return None


def is_qa_item(item: Dict[str, Any]) -> bool:
    return bool(item.get("question") or item.get("response"))


def qa_record(item: Dict[str, Any], doc_type: str, label: str) -> Dict[str, Any]:
    return {
        "type": doc_type,
        "title": item.get("question") or label,
        "text": coalesce_text([item.get("question"), item.get("keywords"), item.get("response")]),
        "payload": item,
    }


def _items(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    items = []
    for item in data.get(key) or []:
        if not isinstance(item, dict):
            logger.warning(f"Skipping malformed item | category={key} | item={item!r}")
            continue
        items.append(item)
    return items


def normalize_records(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Normalize parsed campus JSON into ``{type, title, text, payload}`` records."""
    records: List[Dict[str, Any]] = []

    for category in STRUCTURED_CATEGORIES:
        if not isinstance(data.get(category.key), list):
            continue
        for item in _items(data, category.key):
            if category.qa_only or is_qa_item(item):
                records.append(qa_record(item, category.doc_type, category.label))
                continue
            records.append({
                "type": category.doc_type,
                "title": item.get("name") or category.label,
                "text": coalesce_text(_first(item, keys) for keys in category.fields),
                "payload": item,
            })

    if isinstance(data.get(ENTRIES_KEY), list):
        for item in _items(data, ENTRIES_KEY):
            title = item.get("title") or item.get("key") or "Entry"
            records.append({
                "type": "entry",
                "title": title,
                "text": coalesce_text([title, item.get("value") or ""]),
                "payload": item,
            })

    for key, value in data.items():
        if key in KNOWN_KEYS or not isinstance(value, list):
            continue
        for item in _items(data, key):
            if is_qa_item(item):
                records.append(qa_record(item, key, key))

    return records


def read_campus_data(path: Path) -> Dict[str, Any]:
    """Read the campus JSON file; missing or malformed data yields ``{}``."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Campus data not readable, starting with empty dataset | path={path} | error={e}")
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse campus data | path={path} | error={e}")
        return {}

    if not isinstance(data, dict):
        logger.error(f"Campus data root must be an object | path={path} | type={type(data).__name__}")
        return {}
    return data


def load_campus_documents(path: Optional[Path] = None) -> List[Dict[str, Any]]:
    path = path or CAMPUS_DATA_PATH
    records = normalize_records(read_campus_data(path))
    logger.info(f"Campus data loaded | path={path} | records={len(records)}")
    return records


if __name__ == "__main__":
    documents = load_campus_documents()
    counts: Dict[str, int] = {}
    for doc in documents:
        counts[doc["type"]] = counts.get(doc["type"], 0) + 1
    for doc_type, count in sorted(counts.items()):
        print(f"  {doc_type}: {count}")
    print(f"Total: {len(documents)} records")
