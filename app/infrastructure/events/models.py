"""Event models for infrastructure event system.

Provides the generic Event record passed to registered handlers.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass
class Event:
    """Record of something that happened, passed to event handlers.

    Events carry their payload in ``metadata`` so handlers can be shared
    between producers (e.g. a locale switch in the UI and a background load).
    """

    event_type: str
    """The type of event (e.g., 'translator.translations.loaded')."""

    timestamp: datetime = field(default_factory=datetime.now)
    """When the event occurred."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track related events across the system."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    """Custom metadata for this event type."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary.

        Returns:
            Dictionary with an ISO format timestamp and the correlation ID
            as string.
        """
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["correlation_id"] = str(self.correlation_id)
        return data
