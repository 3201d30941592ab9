"""Campus query engine: index lifecycle, retrieval, answer synthesis, and refinement."""

import logging
import threading
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from vcompass.answers import synthesize
from vcompass.confidence import CONFIDENCE_THRESHOLD, ConfidenceGate
from vcompass.index import IndexSnapshot, build_index
from vcompass.ingest import load_campus_documents
from vcompass.keywords import keyword_fallback
from vcompass.logging_config import QueryMetrics, log_latency
from vcompass.prompts import (
    CONFIRM_ANSWER_PROMPT,
    DEFAULT_NO_ANSWER,
    DIRECT_ANSWER_PROMPT,
    GREETING_REPLY,
)
from vcompass.search import SearchHit, search

logger = logging.getLogger(__name__)


class ReloadError(RuntimeError):
    """Raised when a new snapshot could not be built; the old one stays live."""


class CampusEngine:
    def __init__(
        self,
        data_path: Optional[Path] = None,
        refiner=None,
        confidence_threshold: float = CONFIDENCE_THRESHOLD,
    ):
        self.data_path = data_path
        self.refiner = refiner
        self.gate = ConfidenceGate(confidence_threshold)
        self.metrics = QueryMetrics()
        self._snapshot = IndexSnapshot()
        self._reload_lock = threading.Lock()

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    @property
    def refiner_configured(self) -> bool:
        return bool(self.refiner is not None and getattr(self.refiner, "is_configured", True))

    def load_documents(self, raw_documents: Iterable[Mapping[str, Any]]) -> int:
        """Build a new snapshot from ``raw_documents`` and publish it."""
        with self._reload_lock:
            try:
                snapshot = build_index(raw_documents)
            except Exception as e:
                logger.error(f"Index rebuild failed, keeping previous snapshot | error={e}")
                raise ReloadError(str(e)) from e
            self._snapshot = snapshot

        logger.info(
            f"Index rebuilt | documents={len(snapshot)} | terms={len(snapshot.document_frequency)}"
        )
        return len(snapshot)

    @log_latency("engine.reload")
    def reload(self) -> int:
        try:
            records = load_campus_documents(self.data_path)
        except Exception as e:
            logger.error(f"Campus data normalization failed | error={e}")
            raise ReloadError(str(e)) from e
        count = self.load_documents(records)

        reset_circuit = getattr(self.refiner, "reset_circuit", None)
        if reset_circuit is not None:
            reset_circuit()
        return count

    def search(self, query: str, top_k: int = 1) -> List[SearchHit]:
        return search(self._snapshot, query, top_k)

    def match(self, question: str) -> Tuple[Optional[SearchHit], bool]:
        """Return a confident hit and whether it came from the keyword fallback."""
        snapshot = self._snapshot

        results = search(snapshot, question, top_k=1)
        if results and self.gate.is_confident(results[0].score):
            return results[0], False

        best = results[0].score if results else 0.0
        logger.info(f"Low confidence match, trying keyword fallback | best_score={best:.3f}")
        hit = keyword_fallback(snapshot, question, self.gate.threshold)
        return hit, hit is not None

    async def _refine(self, prompt: str) -> Optional[str]:
        try:
            return await self.refiner.refine(prompt)
        except Exception as e:
            logger.error(f"Refiner raised unexpectedly: {e}")
            return None

    def _refinement_available(self) -> bool:
        return self.refiner is not None and bool(getattr(self.refiner, "available", True))

    @log_latency("engine.ask_async")
    async def ask_async(self, question: Optional[str]) -> Dict:
        start = time.perf_counter()
        question = question or ""

        if not question.strip():
            self.metrics.record_query(found=False, latency_ms=0.0, empty=True)
            return {"reply": GREETING_REPLY, "found": False, "meta": {}}

        logger.info(f"Query received | question_length={len(question)}")

        hit, used_fallback = self.match(question)
        attempted = self._refinement_available()

        if hit is not None:
            local_answer = synthesize(hit.document)
            refined = None
            if attempted:
                refined = await self._refine(
                    CONFIRM_ANSWER_PROMPT.format(question=question, answer=local_answer)
                )
            self.metrics.record_query(
                found=True,
                latency_ms=(time.perf_counter() - start) * 1000,
                used_fallback=used_fallback,
                refinement_attempted=attempted,
                refinement_succeeded=refined is not None,
            )
            logger.info(
                f"Local answer | type={hit.document.type} | score={hit.score:.3f} | refined={refined is not None}"
            )
            return {
                "reply": refined or local_answer,
                "found": True,
                "meta": {
                    "type": hit.document.type,
                    "title": hit.document.title,
                    "verified": attempted,
                },
            }

        refined = None
        if attempted:
            refined = await self._refine(DIRECT_ANSWER_PROMPT.format(question=question))
        self.metrics.record_query(
            found=False,
            latency_ms=(time.perf_counter() - start) * 1000,
            refinement_attempted=attempted,
            refinement_succeeded=refined is not None,
        )
        logger.info(f"No local match | refined={refined is not None}")
        return {
            "reply": refined or DEFAULT_NO_ANSWER,
            "found": False,
            "meta": {"usedGemini": attempted},
        }
