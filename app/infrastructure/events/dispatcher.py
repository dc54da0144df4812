"""Event dispatcher for infrastructure event system.

Provides an in-process handler registry. Handlers are registered with a
decorator and called synchronously, in registration order, when events are
dispatched.
"""

from typing import Any, Callable, Dict, List

from infrastructure.events.models import Event
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Event handler registry: event_type -> list of handlers
EVENT_HANDLERS: Dict[str, List[Callable]] = {}


def register_event_handler(event_type: str):
    """Decorator to register an event handler for a specific event type.

    Args:
        event_type: The type of event to handle
            (e.g., 'translator.translations.loaded').

    Returns:
        Decorator function that registers the handler.
    """

    def decorator(handler_func: Callable) -> Callable:
        EVENT_HANDLERS.setdefault(event_type, []).append(handler_func)
        logger.debug(
            "registered_event_handler",
            handler=getattr(handler_func, "__name__", "unknown"),
            event_type=event_type,
            total_handlers=len(EVENT_HANDLERS[event_type]),
        )
        return handler_func

    return decorator


def dispatch_event(event: Event) -> List[Any]:
    """Dispatch event synchronously to all registered handlers.

    If a handler raises, the error is logged and the remaining handlers
    still run.

    Args:
        event: The event to dispatch.

    Returns:
        List of return values from the handlers that succeeded.
    """
    results = []
    handlers = EVENT_HANDLERS.get(event.event_type, [])

    logger.info(
        "dispatching_event",
        event_type=event.event_type,
        handler_count=len(handlers),
        correlation_id=str(event.correlation_id),
    )

    for handler in handlers:
        try:
            results.append(handler(event))
        except Exception as e:
            logger.error(
                "event_handler_failed",
                handler=getattr(handler, "__name__", "unknown"),
                event_type=event.event_type,
                error=str(e),
                correlation_id=str(event.correlation_id),
            )

    return results


def get_registered_events() -> List[str]:
    """Get list of all registered event types."""
    return list(EVENT_HANDLERS.keys())


def get_handlers_for_event(event_type: str) -> List[Callable]:
    """Get all handlers registered for a specific event type.

    Args:
        event_type: The event type to query.

    Returns:
        List of handler functions.
    """
    return EVENT_HANDLERS.get(event_type, [])


def clear_handlers() -> None:
    """Clear all registered handlers.

    WARNING: This is intended for testing only.
    """
    EVENT_HANDLERS.clear()
    logger.debug("cleared_all_event_handlers")
