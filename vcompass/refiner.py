"""Best-effort Gemini refinement with timeout and circuit breaker."""

import asyncio
import logging
import time
from typing import Optional

import google.genai as genai

logger = logging.getLogger(__name__)

REFINE_TIMEOUT = 15.0
MAX_FAILURES_BEFORE_OPEN = 3
CIRCUIT_COOLDOWN = 60.0


class GeminiRefiner:
    """Asks Gemini to confirm or answer a question.

    Every failure mode (missing key, timeout, API error, empty text, open
    circuit) yields ``None`` so callers can fall back to local answers.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-2.0-flash",
        timeout: float = REFINE_TIMEOUT,
        circuit_cooldown: float = CIRCUIT_COOLDOWN,
    ):
        self.model = model
        self.timeout = timeout
        self.circuit_cooldown = circuit_cooldown
        self.client = genai.Client(api_key=api_key) if api_key else None
        self._failure_count = 0
        self._circuit_open = False
        self._opened_at = 0.0

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    @property
    def available(self) -> bool:
        return self.is_configured and (not self._circuit_open or self._cooldown_elapsed())

    def _cooldown_elapsed(self) -> bool:
        return time.monotonic() - self._opened_at >= self.circuit_cooldown

    def reset_circuit(self):
        self._circuit_open = False
        self._failure_count = 0
        logger.info("Refinement circuit breaker reset")

    def _record_failure(self):
        self._failure_count += 1
        if self._failure_count >= MAX_FAILURES_BEFORE_OPEN:
            self._circuit_open = True
            self._opened_at = time.monotonic()
            logger.error(f"Circuit breaker OPEN - refinement paused | cooldown_s={self.circuit_cooldown}")

    async def refine(self, prompt: str) -> Optional[str]:
        if not self.is_configured:
            return None
        if self._circuit_open:
            if not self._cooldown_elapsed():
                logger.warning("Refinement circuit open, skipping Gemini call")
                return None
            # Half-open: one trial call; a single failure reopens the circuit.
            self._circuit_open = False
            self._failure_count = MAX_FAILURES_BEFORE_OPEN - 1
            logger.info("Circuit breaker HALF-OPEN - trying Gemini again")

        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self.client.models.generate_content,
                    model=self.model,
                    contents=prompt,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            self._record_failure()
            logger.error(f"Refinement timeout | failures={self._failure_count}")
            return None
        except Exception as e:
            self._record_failure()
            logger.error(f"Refinement error: {e} | failures={self._failure_count}")
            return None

        text = getattr(response, "text", None)
        if not isinstance(text, str) or not text.strip():
            self._record_failure()
            logger.warning(f"Refinement returned no text | failures={self._failure_count}")
            return None

        self._failure_count = 0
        logger.info(f"Refinement complete | answer_length={len(text.strip())}")
        return text.strip()
