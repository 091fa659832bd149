"""Uldar — Exceptions for conditions that are not API call outcomes."""


class DuplicateRegistrationError(ValueError):
    """Raised when a registry is built with two entries sharing a key."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"Duplicate {kind} registration: {key!r}")


class WidgetDataProviderNotFoundError(Exception):
    """Raised when a widget rendering configuration references widget ids with no data provider."""

    def __init__(self, widget_ids: list[str]):
        self.widget_ids = widget_ids
        super().__init__(f"WidgetDataProvider not found for widgets ids = {widget_ids}")


class UnsupportedWidgetApiError(Exception):
    """Raised by widgets which do not serve API calls."""
