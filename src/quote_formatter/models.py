from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"


class FormatterSettings(BaseModel):
    """Toggles stored in the host's extension settings under the module key."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = True
    process_incoming: bool = Field(default=True, alias="processIncoming")
    process_outgoing: bool = Field(default=True, alias="processOutgoing")

    def to_store(self) -> dict[str, bool]:
        return self.model_dump(by_alias=True)


DEFAULT_SETTINGS = FormatterSettings()


class ChatMessage(BaseModel):
    """
    A host-owned chat message record.

    The interceptor rewrites `mes` and `swipes` in place and addresses the
    message by `index` when asking the host to re-render it.
    """

    index: int
    mes: str | None = None
    swipes: list[str | None] | None = None
    name: str | None = None
    is_user: bool = False


class SettingsCheckbox(BaseModel):
    id: str
    label: str
    checked: bool
