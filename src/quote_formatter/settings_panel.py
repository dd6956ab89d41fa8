"""Settings panel: three checkboxes bound to the plugin settings."""

import structlog

from .exceptions import UnknownControlError
from .models import FormatterSettings, SettingsCheckbox
from .repository import SettingsRepository

log = structlog.get_logger(__name__)

# control id -> (settings field, label)
CHECKBOXES: dict[str, tuple[str, str]] = {
    "quote_formatter_enabled": ("enabled", "Enable Quote Formatter"),
    "quote_formatter_incoming": ("process_incoming", "Process AI messages"),
    "quote_formatter_outgoing": ("process_outgoing", "Process user messages"),
}


class SettingsPanel:
    def __init__(self, repository: SettingsRepository):
        self.repository = repository

    def controls(self) -> list[SettingsCheckbox]:
        """Current checkbox states, in display order."""
        settings = self.repository.load()
        return [
            SettingsCheckbox(id=control_id, label=label, checked=getattr(settings, field))
            for control_id, (field, label) in CHECKBOXES.items()
        ]

    def on_change(self, control_id: str, checked: bool) -> FormatterSettings:
        if control_id not in CHECKBOXES:
            log.warning("Change for unknown settings control", control_id=control_id)
            raise UnknownControlError(control_id)

        field, _ = CHECKBOXES[control_id]
        settings = self.repository.load()
        setattr(settings, field, bool(checked))
        self.repository.save(settings)

        log.info("Settings toggled", field=field, value=bool(checked))
        return settings

