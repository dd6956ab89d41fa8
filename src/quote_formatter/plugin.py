import functools

import structlog

from .config import get_config
from .host import ChatHost
from .interceptor import MessageInterceptor
from .repository import ExtensionSettingsRepository
from .settings_panel import CHECKBOXES, SettingsPanel

log = structlog.get_logger(__name__)


class QuoteFormatterPlugin:
    name = "quote_formatter"
    version = "1.0.0"
    description = "Removes asterisks from inside quoted text, keeping them outside quotes."

    def __init__(self, module_name: str | None = None):
        self.module_name = module_name or get_config().module_name
        self.repository: ExtensionSettingsRepository | None = None
        self.interceptor: MessageInterceptor | None = None
        self.panel: SettingsPanel | None = None

    async def setup(self, host: ChatHost) -> None:
        self.repository = ExtensionSettingsRepository(
            host.extension_settings,
            host.save_settings_debounced,
            module_name=self.module_name,
        )
        self.repository.load()

        self.interceptor = MessageInterceptor(host, self.repository)
        self.interceptor.register(host.event_source)

        self.panel = SettingsPanel(self.repository)
        try:
            html = await host.render_extension_template(self.module_name, "settings")
            host.append_settings_html(html)
            for control_id in CHECKBOXES:
                host.on_settings_change(
                    control_id, functools.partial(self.panel.on_change, control_id)
                )
        except Exception as e:
            log.error(
                "Failed to mount settings panel",
                module=self.module_name,
                error=str(e),
                exc_info=True,
            )

        log.info("Quote Formatter extension initialized", version=self.version)
