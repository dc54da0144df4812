"""Event-driven translator provider.

The delegate hands load requests to this provider as events instead of
awaiting the load itself. Events are processed one at a time; each state
change is pushed to the registered listeners and the outcome is announced
through the infrastructure event dispatcher.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Set

from infrastructure.events import Event, dispatch_event
from infrastructure.i18n.delegate import LOAD_REQUESTED_EVENT
from infrastructure.i18n.models import Locale
from infrastructure.i18n.provider import TranslatorProvider
from infrastructure.logging import get_module_logger

logger = get_module_logger()

TRANSLATIONS_LOADED_EVENT = "translator.translations.loaded"
TRANSLATIONS_FAILED_EVENT = "translator.translations.failed"


class TranslatorStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class TranslatorState:
    """Snapshot of the provider after handling an event."""

    status: TranslatorStatus
    locale: Optional[Locale] = None
    error: Optional[str] = None


StateListener = Callable[[TranslatorState], None]


class ReactiveTranslatorProvider(TranslatorProvider):
    """Translator provider that loads in response to queued events."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.state = TranslatorState(TranslatorStatus.UNINITIALIZED)
        self._listeners: List[StateListener] = []
        self._tasks: Set[asyncio.Task] = set()
        self._lock = asyncio.Lock()

    def listen(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener.

        Listener errors are logged and do not interrupt event processing.

        Returns:
            Function removing the listener; calling it again does nothing.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add(self, event: Event) -> None:
        """Queue an event for processing on the running loop."""
        task = asyncio.get_running_loop().create_task(self._process(event))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait_idle(self) -> None:
        """Wait until every queued event has been processed."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _process(self, event: Event) -> None:
        async with self._lock:
            await self.handle_event(event)

    def _emit(self, state: TranslatorState) -> None:
        self.state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception(
                    "state_listener_failed",
                    listener=getattr(listener, "__name__", "unknown"),
                    status=state.status.value,
                )

    async def handle_event(self, event: Event) -> TranslatorState:
        """Turn an event into the resulting state."""
        if event.event_type != LOAD_REQUESTED_EVENT:
            logger.warning("unhandled_translator_event", event_type=event.event_type)
            return self.state

        locale: Locale = event.metadata["locale"]
        self._emit(TranslatorState(TranslatorStatus.LOADING, locale))

        try:
            table = await self.load(locale)
        except Exception as e:
            logger.exception("translation_load_failed", locale=str(locale))
            self._emit(TranslatorState(TranslatorStatus.FAILED, locale, error=str(e)))
            dispatch_event(
                Event(
                    event_type=TRANSLATIONS_FAILED_EVENT,
                    correlation_id=event.correlation_id,
                    metadata={"locale": str(locale), "error": str(e)},
                )
            )
            return self.state

        if table is None:
            self._emit(TranslatorState(TranslatorStatus.NOT_FOUND, locale))
            return self.state

        self._emit(TranslatorState(TranslatorStatus.LOADED, locale))
        dispatch_event(
            Event(
                event_type=TRANSLATIONS_LOADED_EVENT,
                correlation_id=event.correlation_id,
                metadata={"locale": str(locale), "key_count": len(table)},
            )
        )
        return self.state
