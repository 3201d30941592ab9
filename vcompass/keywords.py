"""Keyword-hint fallback for queries that share no terms with indexed text."""

import re
from typing import Optional

from vcompass.index import IndexSnapshot
from vcompass.search import SearchHit
from vcompass.tokenizer import normalize, tokenize

_KEYWORD_SEPARATORS = re.compile(r"[\s,]+")


def keyword_fallback(snapshot: IndexSnapshot, query: str, score: float) -> Optional[SearchHit]:
    """Return the first document whose ``keywords`` hint matches the query.

    A match is a substring containment in either direction or any shared
    token. The hit carries ``score`` as a synthetic value.
    """
    normalized_query = normalize(query)
    if not normalized_query:
        return None
    query_tokens = set(tokenize(query))

    for doc in snapshot.documents:
        keywords = doc.payload.get("keywords")
        if not isinstance(keywords, str) or not keywords:
            continue
        keywords = keywords.lower()

        if normalized_query in keywords or keywords in normalized_query:
            return SearchHit(doc, score)

        keyword_tokens = {t for t in _KEYWORD_SEPARATORS.split(keywords) if t}
        if query_tokens & keyword_tokens:
            return SearchHit(doc, score)

    return None
