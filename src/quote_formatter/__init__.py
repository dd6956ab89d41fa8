"""Quote formatter: strips asterisks from inside quoted chat text."""

from .interceptor import MessageInterceptor, should_process
from .logging_config import setup_structlog
from .models import ChatMessage, Direction, FormatterSettings
from .plugin import QuoteFormatterPlugin
from .repository import ExtensionSettingsRepository, SettingsRepository
from .settings_panel import SettingsPanel
from .transformer import remove_asterisks_from_quotes

PLUGIN_METADATA = {
    "name": QuoteFormatterPlugin.name,
    "version": QuoteFormatterPlugin.version,
    "description": QuoteFormatterPlugin.description,
}

__all__ = [
    "ChatMessage",
    "Direction",
    "ExtensionSettingsRepository",
    "FormatterSettings",
    "MessageInterceptor",
    "PLUGIN_METADATA",
    "QuoteFormatterPlugin",
    "SettingsPanel",
    "SettingsRepository",
    "remove_asterisks_from_quotes",
    "setup_structlog",
    "should_process",
]
