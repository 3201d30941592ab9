"""Logging setup, latency tracking, and query outcome counters."""

import asyncio
import logging
import threading
import time
from functools import wraps
from typing import Callable, Optional, Union


def setup_logging(level: Union[int, str] = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def log_latency(operation_name: str):
    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        def report(start: float, error: Optional[Exception] = None):
            latency_ms = (time.perf_counter() - start) * 1000
            if error is None:
                logger.info(f"{operation_name} | latency_ms={latency_ms:.2f} | status=success")
            else:
                logger.error(f"{operation_name} | latency_ms={latency_ms:.2f} | status=error | error={error}")

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                report(start, e)
                raise
            report(start)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                report(start, e)
                raise
            report(start)
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


class QueryMetrics:
    def __init__(self):
        self._lock = threading.Lock()
        self.total_queries = 0
        self.empty_queries = 0
        self.local_answers = 0
        self.keyword_fallbacks = 0
        self.unanswered = 0
        self.refinement_attempts = 0
        self.refinement_failures = 0
        self.total_latency_ms = 0.0

    def record_query(
        self,
        *,
        found: bool,
        latency_ms: float,
        empty: bool = False,
        used_fallback: bool = False,
        refinement_attempted: bool = False,
        refinement_succeeded: bool = False,
    ):
        with self._lock:
            self.total_queries += 1
            self.total_latency_ms += latency_ms

            if empty:
                self.empty_queries += 1
            elif found:
                self.local_answers += 1
            else:
                self.unanswered += 1

            if used_fallback:
                self.keyword_fallbacks += 1

            if refinement_attempted:
                self.refinement_attempts += 1
                if not refinement_succeeded:
                    self.refinement_failures += 1

    def get_stats(self) -> dict:
        with self._lock:
            avg_latency = self.total_latency_ms / self.total_queries if self.total_queries > 0 else 0
            return {
                "total_queries": self.total_queries,
                "empty_queries": self.empty_queries,
                "local_answers": self.local_answers,
                "keyword_fallbacks": self.keyword_fallbacks,
                "unanswered": self.unanswered,
                "refinement_attempts": self.refinement_attempts,
                "refinement_failures": self.refinement_failures,
                "avg_latency_ms": round(avg_latency, 2),
            }
