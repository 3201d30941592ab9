"""Text normalization and unigram + bigram tokenization."""

import re
from typing import List, Optional

STOPWORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has", "he",
    "in", "is", "it", "its", "of", "on", "that", "the", "to", "was", "were",
    "will", "with", "this", "these", "those", "your", "you", "me", "we", "our", "us",
})

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    lowered = (text or "").lower()
    return _WHITESPACE.sub(" ", _NON_ALNUM.sub(" ", lowered)).strip()


def tokenize(text: Optional[str]) -> List[str]:
    """Return unigrams followed by adjacent bigrams, stopwords removed.

    Bigrams keep multi-word names ("jane smith") apart from documents that
    only share one of the words.
    """
    unigrams = [t for t in normalize(text).split(" ") if t and t not in STOPWORDS]
    bigrams = [f"{a} {b}" for a, b in zip(unigrams, unigrams[1:])]
    return unigrams + bigrams
