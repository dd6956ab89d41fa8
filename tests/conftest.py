from unittest.mock import AsyncMock, MagicMock

import pytest

from quote_formatter.models import ChatMessage
from quote_formatter.repository import ExtensionSettingsRepository


class FakeEventSource:
    """Stands in for the host event bus and records registered handlers."""

    def __init__(self):
        self.received_handlers = []
        self.sent_handlers = []

    def on_message_received(self, handler):
        self.received_handlers.append(handler)

    def on_message_sent(self, handler):
        self.sent_handlers.append(handler)

    def emit_message_received(self, message):
        for handler in self.received_handlers:
            handler(message)

    def emit_message_sent(self, message_id=None):
        for handler in self.sent_handlers:
            handler(message_id)


@pytest.fixture
def host() -> MagicMock:
    """
    Provides a fake chat host: a real dict for the settings store, a real list
    for the conversation and mocks for every host call we assert on.
    """
    mock = MagicMock()
    mock.event_source = FakeEventSource()
    mock.extension_settings = {}
    mock.chat = [
        ChatMessage(index=0, mes="Hi there", is_user=True),
        ChatMessage(index=1, mes='She said "hello *there*"', name="Bot"),
    ]
    mock.render_extension_template = AsyncMock(return_value="<div>settings</div>")
    return mock


@pytest.fixture
def repository(host: MagicMock) -> ExtensionSettingsRepository:
    return ExtensionSettingsRepository(
        host.extension_settings, host.save_settings_debounced
    )
