"""Custom exception hierarchy for pymetatags."""

from __future__ import annotations


class MetaTagError(Exception):
    """Base exception for all pymetatags errors."""


class MetaTagConfigError(MetaTagError):
    """Invalid renderer configuration."""


class MetaTagConversionError(MetaTagError):
    """A value could not be converted to tag text.

    Raised when something other than a scalar reaches the escaper,
    e.g. a list passed as the ``title`` with ``display_title=True``.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str = "",
        value_type: str = "",
    ) -> None:
        self.name = name
        self.value_type = value_type
        super().__init__(message)
