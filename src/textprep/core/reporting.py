"""Error reporting and latency metrics: the boundary to external monitoring.

textprep does not talk to a monitoring service itself. Callers plug in an
:class:`ErrorReporter` (e.g. a thin Sentry client wrapper) and
:class:`LatencyObserver` instances (e.g. labelled Prometheus histograms);
everything is logged through loguru regardless.
"""

from __future__ import annotations

import os
import time
from typing import Protocol, runtime_checkable

from loguru import logger


@runtime_checkable
class ErrorReporter(Protocol):
    """Protocol for forwarding errors to an external monitoring service."""

    def capture(self, error: BaseException, context: dict[str, str]) -> None:
        """Send *error* with string *context* and wait for delivery."""
        ...


@runtime_checkable
class LatencyObserver(Protocol):
    """Protocol for a labelled latency histogram."""

    def observe(self, seconds: float, **labels: str) -> None:
        """Record one observation of *seconds* under *labels*."""
        ...


def sentry_dsn(env_prefix: str = "", env_separator: str = "_", sentry_url: str = "") -> str | None:
    """Build a Sentry DSN from ``<prefix><sep>SENTRY_KEY`` / ``SENTRY_PROJECT`` env vars.

    Returns None when either variable is unset or empty, or no host is configured.
    """
    key = os.environ.get(f"{env_prefix}{env_separator}SENTRY_KEY", "")
    project = os.environ.get(f"{env_prefix}{env_separator}SENTRY_PROJECT", "")
    if not key or not project or not sentry_url:
        return None
    return f"https://{key}@{sentry_url}/{project}"


def report_error(location: str, error: BaseException, reporter: ErrorReporter | None = None) -> str:
    """Log *error* raised at *location*, forwarding it to *reporter* when given.

    A reporter failure is logged alongside the original error and never
    propagates to the caller. Returns the formatted message.
    """
    message = f"Location: {location} ~ Error: {error}"
    if reporter is not None:
        try:
            reporter.capture(error, {"err": message})
        except Exception as e:
            logger.error(f"Original error: {message}")
            logger.error(f"Failed to report error: {e}")
            return message
    logger.error(message)
    return message


def log_metrics(
    start_time: float,
    handler: str,
    status_code: int,
    requests: LatencyObserver | None = None,
    handlers: LatencyObserver | None = None,
) -> float:
    """Observe the time elapsed since *start_time* (a ``time.monotonic()`` value).

    Args:
        start_time: Monotonic timestamp taken when the request started.
        handler: Name of the handler that served the request.
        status_code: HTTP status code of the response.
        requests: Observer labelled by status code only.
        handlers: Observer labelled by status code and handler.

    Returns:
        The elapsed time in seconds.
    """
    elapsed = time.monotonic() - start_time
    code = str(status_code)
    if requests is not None:
        requests.observe(elapsed, code=code)
    if handlers is not None:
        handlers.observe(elapsed, code=code, handler=handler)
    return elapsed
