"""
Match confidence gating.

Decides whether a retrieval score is strong enough to answer from local
records without consulting keyword hints.
"""

CONFIDENCE_THRESHOLD = 0.12


class ConfidenceGate:
    def __init__(self, threshold: float = CONFIDENCE_THRESHOLD):
        self.threshold = threshold

    def is_confident(self, score: float) -> bool:
        # Inclusive: a score exactly at the threshold is confident.
        return score >= self.threshold
