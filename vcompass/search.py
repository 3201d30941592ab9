"""Cosine-similarity ranking over an IndexSnapshot."""

from typing import List, Mapping, NamedTuple

from vcompass.index import Document, IndexSnapshot, term_frequencies, vector_length
from vcompass.tokenizer import tokenize


class SearchHit(NamedTuple):
    document: Document
    score: float


def dot(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    shorter, longer = (a, b) if len(a) < len(b) else (b, a)
    return sum(value * longer[term] for term, value in shorter.items() if term in longer)


def search(snapshot: IndexSnapshot, query: str, top_k: int = 1) -> List[SearchHit]:
    """Rank documents by cosine similarity to ``query``, best first.

    Returns an empty list when the query has no terms. Only documents with a
    positive score are returned; ties keep document order.
    """
    query_terms = tokenize(query)
    if not query_terms:
        return []

    query_vector = snapshot.weigh(term_frequencies(query_terms))
    query_length = vector_length(query_vector)

    scored: List[SearchHit] = []
    for doc in snapshot.documents:
        doc_vector = snapshot.weigh(doc.term_frequencies)
        similarity = dot(query_vector, doc_vector) / (query_length * doc.vector_length)
        if similarity > 0:
            scored.append(SearchHit(doc, similarity))

    scored.sort(key=lambda hit: hit.score, reverse=True)
    return scored[:top_k]
