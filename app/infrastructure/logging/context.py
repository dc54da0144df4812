"""Context binding for structured logging.

Binds key/value pairs to structlog's context variables so that every log
entry emitted inside the block carries them, e.g. the locale being loaded.

Usage:
    from infrastructure.logging import bind_log_context

    with bind_log_context(locale="fr_CA"):
        logger.info("loading_manifest")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_log_context(
    correlation_id: Optional[str] = None, **context: Any
) -> Generator[None, None, None]:
    """Bind context to all logs emitted within the block.

    Args:
        correlation_id: Identifier shared by the entries of one operation.
            Defaults to the ID already bound by an enclosing block, or a new
            one at the outermost level.
        **context: Additional key-value pairs; ``None`` values are dropped.

    Yields:
        None - context is bound to structlog's context vars. Values bound
        by an enclosing block are restored on exit.
    """
    bound = {key: value for key, value in context.items() if value is not None}
    bound["correlation_id"] = (
        correlation_id or get_correlation_id() or str(uuid.uuid4())
    )

    with structlog.contextvars.bound_contextvars(**bound):
        yield


def get_correlation_id() -> Optional[str]:
    """Return the correlation ID bound to the current context, if any."""
    return structlog.contextvars.get_contextvars().get("correlation_id")
