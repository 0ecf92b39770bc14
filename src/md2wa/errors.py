"""md2wa exceptions. The conversion core never raises these."""

from __future__ import annotations


class Md2WaError(Exception):
    """Base for md2wa errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_error = original_error


class Md2WaConfigurationError(Md2WaError):
    """Config validation or load failure."""


class Md2WaInputError(Md2WaError):
    """Input text could not be read."""


class Md2WaShareError(Md2WaError):
    """Share link could not be built."""


class Md2WaOutputError(Md2WaError):
    """Converted text could not be written."""
