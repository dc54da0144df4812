"""Unit tests for infrastructure event models."""

from datetime import datetime
from uuid import UUID

import pytest

from infrastructure.events.models import Event

pytestmark = pytest.mark.unit


class TestEvent:
    """Tests for Event."""

    def test_event_creation_with_defaults(self):
        event = Event(event_type="translator.load_requested")

        assert event.event_type == "translator.load_requested"
        assert event.metadata == {}
        assert isinstance(event.timestamp, datetime)
        assert isinstance(event.correlation_id, UUID)

    def test_events_get_distinct_correlation_ids(self):
        assert Event("a").correlation_id != Event("a").correlation_id

    def test_event_to_dict_serialization(self, event_factory):
        """to_dict renders the timestamp and correlation ID as strings."""
        event = event_factory(metadata={"locale": "fr_CA", "key_count": 3})

        data = event.to_dict()

        assert data["event_type"] == "translator.translations.loaded"
        assert data["timestamp"] == event.timestamp.isoformat()
        assert data["correlation_id"] == str(event.correlation_id)
        assert data["metadata"] == {"locale": "fr_CA", "key_count": 3}

    def test_metadata_is_not_shared(self):
        first = Event("a")
        first.metadata["locale"] = "en"
        assert Event("a").metadata == {}
