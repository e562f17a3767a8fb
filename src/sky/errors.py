class SkyError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigError(SkyError):
    """Configuration could not be read or written. Fatal."""


class MissingApiKeyError(ConfigError):
    def __init__(
        self, message: str = "Missing API key, run `sky config --api-key <KEY>`"
    ):
        super().__init__(message)


class CompletionError(SkyError):
    """A single chat turn failed. The REPL reports it and keeps going."""
