"""Repository layer for the plugin's settings record."""

from collections.abc import Callable, MutableMapping
from typing import Any, Protocol

from pydantic import ValidationError
from structlog import get_logger

from .exceptions import SettingsStoreError
from .models import DEFAULT_SETTINGS, FormatterSettings

logger = get_logger(__name__)


class SettingsRepository(Protocol):
    def load(self) -> FormatterSettings: ...

    def save(self, settings: FormatterSettings) -> None: ...


class ExtensionSettingsRepository:
    """Reads and writes settings through the host's extension settings store."""

    def __init__(
        self,
        store: MutableMapping[str, Any],
        save_debounced: Callable[[], None],
        module_name: str = "quote_formatter",
    ):
        self._store = store
        self._save_debounced = save_debounced
        self.module_name = module_name

    def load(self) -> FormatterSettings:
        """
        Return the stored settings, creating or backfilling the record first.

        A missing record is created from defaults; a record missing some keys
        (e.g. written by an older version) gets those keys filled in. Either
        case is persisted.
        """
        record = self._store.get(self.module_name)

        if record is None:
            self._store[self.module_name] = DEFAULT_SETTINGS.to_store()
            logger.info("Created default settings", module=self.module_name)
            self._save_debounced()
            return DEFAULT_SETTINGS.model_copy()

        if not isinstance(record, MutableMapping):
            logger.error(
                "Stored settings are not a mapping",
                module=self.module_name,
                record_type=type(record).__name__,
            )
            raise SettingsStoreError(
                f"Settings for {self.module_name} must be a mapping, "
                f"got {type(record).__name__}"
            )

        backfilled = []
        for key, value in DEFAULT_SETTINGS.to_store().items():
            if record.get(key) is None:
                record[key] = value
                backfilled.append(key)

        if backfilled:
            logger.info(
                "Backfilled missing settings keys",
                module=self.module_name,
                keys=backfilled,
            )
            self._save_debounced()

        try:
            return FormatterSettings.model_validate(record)
        except ValidationError as e:
            logger.error(
                "Stored settings failed validation",
                module=self.module_name,
                error=str(e),
            )
            raise SettingsStoreError(f"Invalid settings for {self.module_name}: {e}")

    def save(self, settings: FormatterSettings) -> None:
        record = self._store.get(self.module_name)
        if isinstance(record, MutableMapping):
            record.update(settings.to_store())
        else:
            self._store[self.module_name] = settings.to_store()

        logger.debug("Saved settings", module=self.module_name, **settings.to_store())
        self._save_debounced()
