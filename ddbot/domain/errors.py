"""Error taxonomy for configuration and translation failures."""


class ConfigError(Exception):
    """Required process configuration is missing or invalid."""


class TranslationError(Exception):
    """Base class for a failed translation call."""


class RemoteError(TranslationError):
    """The translation service answered with a non-success status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Server error: {status_code}")


class ConnectivityError(TranslationError):
    """The translation service could not be reached."""


class DecodeError(TranslationError):
    """The response body did not have the expected shape."""
