import functools
import uuid

import structlog

from .models import Direction

log = structlog.get_logger(__name__)


def bind_context(direction: Direction):
    """
    Decorator factory binding handler context to structlog's contextvars,
    so every log line emitted while handling an event carries the direction,
    the handler name and a unique trace_id. Context bound by the host before
    the event is restored afterwards.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with structlog.contextvars.bound_contextvars(
                direction=direction.value,
                handler=func.__name__,
                trace_id=str(uuid.uuid4()),
            ):
                return func(*args, **kwargs)

        return wrapper

    return decorator


def swallow_errors(direction: Direction):
    """
    Decorator factory for event handlers: any exception is logged and dropped
    so it never reaches the host's event dispatcher.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log.exception(
                    f"[Quote Formatter] Error processing {direction.value} message",
                    func_name=func.__name__,
                    error=str(e),
                )
                return None

        return wrapper

    return decorator
