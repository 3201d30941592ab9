"""
TF-IDF index over campus documents.

An IndexSnapshot is built in one pass from raw ``{type, title, text, payload}``
records and never mutated afterwards. Reloading builds a new snapshot; callers
publish it by swapping a single reference.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from vcompass.tokenizer import tokenize

IDF_SMOOTHING = 1.0
IDF_BASE_WEIGHT = 1.0


@dataclass(frozen=True)
class Document:
    id: int
    type: str
    title: str
    text: str
    payload: Dict[str, Any] = field(default_factory=dict)
    term_frequencies: Dict[str, float] = field(default_factory=dict)
    vector_length: float = 1.0


@dataclass(frozen=True)
class IndexSnapshot:
    documents: Tuple[Document, ...] = ()
    document_frequency: Dict[str, int] = field(default_factory=dict)
    inverse_document_frequency: Dict[str, float] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.documents)

    def weigh(self, term_frequencies: Mapping[str, float]) -> Dict[str, float]:
        return apply_idf(term_frequencies, self.inverse_document_frequency)


def term_frequencies(tokens: Sequence[str]) -> Dict[str, float]:
    counts: Dict[str, int] = {}
    for token in tokens:
        counts[token] = counts.get(token, 0) + 1
    total = sum(counts.values()) or 1
    return {term: count / total for term, count in counts.items()}


def apply_idf(tf: Mapping[str, float], idf: Mapping[str, float]) -> Dict[str, float]:
    weighted = {}
    for term, value in tf.items():
        weight = value * idf.get(term, 0.0)
        if weight > 0:
            weighted[term] = weight
    return weighted


def vector_length(vector: Mapping[str, float]) -> float:
    # Floored at 1 so documents without indexable terms never divide by zero.
    return math.sqrt(sum(v * v for v in vector.values())) or 1.0


def compute_idf(document_frequency: Mapping[str, int], num_documents: int) -> Dict[str, float]:
    n = max(num_documents, 1)
    return {
        term: math.log((IDF_SMOOTHING + n) / (IDF_SMOOTHING + df)) + IDF_BASE_WEIGHT
        for term, df in document_frequency.items()
    }


def build_index(raw_documents: Iterable[Mapping[str, Any]]) -> IndexSnapshot:
    """Build a complete snapshot from raw records, preserving input order."""
    records: List[Mapping[str, Any]] = list(raw_documents)

    tfs: List[Dict[str, float]] = []
    document_frequency: Dict[str, int] = {}
    for record in records:
        tf = term_frequencies(tokenize(record.get("text")))
        tfs.append(tf)
        for term in tf:
            document_frequency[term] = document_frequency.get(term, 0) + 1

    idf = compute_idf(document_frequency, len(records))

    documents = tuple(
        Document(
            id=position,
            type=str(record.get("type") or ""),
            title=str(record.get("title") or ""),
            text=record.get("text") or "",
            payload=dict(record.get("payload") or {}),
            term_frequencies=tf,
            vector_length=vector_length(apply_idf(tf, idf)),
        )
        for position, (record, tf) in enumerate(zip(records, tfs))
    )

    return IndexSnapshot(
        documents=documents,
        document_frequency=document_frequency,
        inverse_document_frequency=idf,
    )
