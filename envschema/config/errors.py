from ..common import compat_typing as t
from ..common.duration import DurationError  # noqa: F401


class ParseError(ValueError):
    """Raised by a type parser when the raw value can not be converted."""


class SchemaLoadError(RuntimeError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"CONFIG: Can't access config definition: {self.detail}"


class ConfigError(ValueError):
    """Failed to build the configuration for one environment variable.

    ``reason`` is None when the variable is missing or empty.
    """

    def __init__(self, env_key: str, reason: t.Optional[str] = None) -> None:
        super().__init__(env_key, reason)
        self.env_key = env_key
        self.reason = reason

    def __str__(self) -> str:
        if self.reason is None:
            return f'CONFIG: Environment variable {self.env_key} is missing'
        return f'CONFIG: Error parsing environment variable {self.env_key}: {self.reason}'
