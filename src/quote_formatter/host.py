"""Protocols for the chat application hosting the plugin."""

from collections.abc import Callable, MutableMapping, Sequence
from typing import Any, Protocol

from .models import ChatMessage

MessageReceivedHandler = Callable[[ChatMessage], None]
MessageSentHandler = Callable[[int | None], None]


class EventSource(Protocol):
    """The host's event bus, narrowed to the two events the plugin consumes."""

    def on_message_received(self, handler: MessageReceivedHandler) -> None: ...

    def on_message_sent(self, handler: MessageSentHandler) -> None: ...


class ChatHost(Protocol):
    event_source: EventSource
    extension_settings: MutableMapping[str, Any]
    chat: Sequence[ChatMessage]

    def save_settings_debounced(self) -> None: ...

    def update_message_block(self, index: int, message: ChatMessage) -> None: ...

    def save_chat_conditional(self) -> None: ...

    async def render_extension_template(
        self, module_name: str, template_name: str
    ) -> str: ...

    def append_settings_html(self, html: str) -> None: ...

    def on_settings_change(
        self, control_id: str, handler: Callable[[bool], None]
    ) -> None: ...
