"""Conversion of exceptions into Outcomes at the public API edge"""
import functools
from typing import Any, Callable, Optional, TypeVar

from hostfs.core.errors import HostfsError
from hostfs.core.outcome import ErrorKind, Outcome
from hostfs.infrastructure.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def to_outcome(exc: Exception) -> Outcome:
    """Describe any exception as a failed Outcome"""
    if isinstance(exc, HostfsError):
        return exc.outcome()
    if isinstance(exc, OSError):
        return Outcome.failure(str(exc), kind=ErrorKind.OS)
    return Outcome.failure(str(exc) or type(exc).__name__)


def outcome_boundary(output: Optional[Callable[[], Any]] = None) -> Callable[[F], F]:
    """Wrap an operation so that no exception escapes it.

    Args:
        output: Factory for the empty output value. When given, the wrapped
            function returns ``(Outcome, value)`` and a caught exception
            yields ``(failure, output())``; otherwise just the failure.
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                outcome = to_outcome(e)
                logger.debug(
                    "operation_failed",
                    operation=func.__qualname__,
                    error_type=type(e).__name__,
                    reason=outcome.message,
                )
                if output is None:
                    return outcome
                return outcome, output()

        return wrapper  # type: ignore[return-value]

    return decorator
