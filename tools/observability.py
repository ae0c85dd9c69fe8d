"""Stage timing logs for the clothing rule pipeline."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, ParamSpec, TypeVar

from babyweather_app.logging_config import current_correlation_id, get_logger, log_event

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 3)


def _emit(level: int, event: str, stage: str, correlation_id: str, **fields: Any) -> None:
    log_event(LOGGER, level, event, stage=stage, correlation_id=correlation_id, **fields)


def instrument_stage(stage_name: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log ``stage_started``/``stage_completed`` at DEBUG around a rule stage.

    Stages are pure functions, so a failure here is a bug: it is logged as
    ``stage_failed`` with the traceback and re-raised unchanged.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = current_correlation_id()
            started = time.perf_counter()
            if LOGGER.isEnabledFor(logging.DEBUG):
                _emit(logging.DEBUG, "stage_started", stage_name, correlation_id)
            try:
                result = func(*args, **kwargs)
            except Exception:
                _emit(
                    logging.ERROR,
                    "stage_failed",
                    stage_name,
                    correlation_id,
                    duration_ms=_elapsed_ms(started),
                    exc_info=True,
                )
                raise
            if LOGGER.isEnabledFor(logging.DEBUG):
                _emit(logging.DEBUG, "stage_completed", stage_name, correlation_id, duration_ms=_elapsed_ms(started))
            return result

        return wrapper

    return decorator


__all__ = ["instrument_stage"]
