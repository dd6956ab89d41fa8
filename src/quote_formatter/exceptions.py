class QuoteFormatterError(Exception):
    """Base exception for all plugin errors."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(self.detail)


class SettingsStoreError(QuoteFormatterError):
    """Raised when the host settings store holds a record we cannot use."""

    def __init__(self, detail: str = "Malformed settings record"):
        super().__init__(detail)


class UnknownControlError(QuoteFormatterError):
    """Raised when the settings panel receives a change for an unknown control."""

    def __init__(self, control_id: str):
        self.control_id = control_id
        super().__init__(f"Unknown settings control: {control_id}")
