"""Message interceptor applying the quote formatter to chat traffic."""

from collections.abc import Sequence

import structlog
from opentelemetry import trace

from .decorators import bind_context, swallow_errors
from .host import ChatHost, EventSource
from .models import ChatMessage, Direction, FormatterSettings
from .repository import SettingsRepository
from .transformer import remove_asterisks_from_quotes

log = structlog.get_logger(__name__)
tracer = trace.get_tracer(__name__)


def should_process(direction: Direction, settings: FormatterSettings) -> bool:
    if direction is Direction.INCOMING:
        return settings.enabled and settings.process_incoming
    return settings.enabled and settings.process_outgoing


class MessageInterceptor:
    """Rewrites received and sent messages according to the stored settings."""

    def __init__(self, host: ChatHost, repository: SettingsRepository):
        self.host = host
        self.repository = repository

    def register(self, event_source: EventSource) -> None:
        event_source.on_message_received(self.on_message_received)
        event_source.on_message_sent(self.on_message_sent)
        log.info("Registered message handlers")

    @bind_context(Direction.INCOMING)
    @swallow_errors(Direction.INCOMING)
    def on_message_received(self, message: ChatMessage) -> None:
        """
        Format an incoming message and its swipes in place.

        Only a change to the primary text triggers a re-render and save.
        """
        if not should_process(Direction.INCOMING, self.repository.load()):
            return
        if message is None or not isinstance(message.mes, str) or not message.mes:
            return

        with tracer.start_as_current_span("quote_formatter.incoming") as span:
            span.set_attribute("chat.message_index", message.index)

            original = message.mes
            message.mes = remove_asterisks_from_quotes(original)

            if message.swipes:
                for i, swipe in enumerate(message.swipes):
                    if isinstance(swipe, str):
                        message.swipes[i] = remove_asterisks_from_quotes(swipe)

            changed = message.mes != original
            span.set_attribute("quote_formatter.changed", changed)
            if not changed:
                return

            self.host.update_message_block(message.index, message)
            self.host.save_chat_conditional()
            log.info("Formatted incoming message", message_index=message.index)

    @bind_context(Direction.OUTGOING)
    @swallow_errors(Direction.OUTGOING)
    def on_message_sent(self, message_id: int | None = None) -> None:
        if not should_process(Direction.OUTGOING, self.repository.load()):
            return

        message = self._find_message(self.host.chat, message_id)
        if message is None or not isinstance(message.mes, str):
            log.debug("No sent message to format", message_id=message_id)
            return

        with tracer.start_as_current_span("quote_formatter.outgoing") as span:
            span.set_attribute("chat.message_index", message.index)

            formatted = remove_asterisks_from_quotes(message.mes)
            if formatted == message.mes:
                return

            message.mes = formatted
            self.host.update_message_block(message.index, message)
            self.host.save_chat_conditional()
            log.info("Formatted outgoing message", message_index=message.index)

    @staticmethod
    def _find_message(
        chat: Sequence[ChatMessage], message_id: int | None
    ) -> ChatMessage | None:
        """Resolve the sent message; no id means the latest message."""
        if not chat:
            return None
        if message_id is None:
            return chat[-1]
        if 0 <= message_id < len(chat):
            return chat[message_id]
        return None
