import logging
from dataclasses import dataclass, fields
from typing import Any, Dict

from byteunits.core.formatting import (
    DEFAULT_FORMAT_PATTERN,
    DEFAULT_LOCALE,
    DecimalFormatter,
)
from byteunits.core.logging import update_log_level

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatConfig:
    """
    Configuration for human-readable formatting.

    Attributes:
        pattern: LDML number pattern applied to the scaled magnitude
        locale: Locale identifier supplying grouping and decimal symbols
        log_level: Logging level ('debug', 'info', 'warning', 'error')
    """

    pattern: str = DEFAULT_FORMAT_PATTERN
    locale: str = DEFAULT_LOCALE
    log_level: str = "warning"

    @classmethod
    def create_default(cls) -> "FormatConfig":
        """Create a configuration with default values."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "FormatConfig":
        """
        Create a configuration from a dictionary.

        Unknown keys are ignored.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            A new FormatConfig instance
        """
        names = {f.name for f in fields(cls)}
        known = {key: value for key, value in config_dict.items() if key in names}
        ignored = set(config_dict) - set(known)
        if ignored:
            log.debug(f"Ignoring unknown format config keys: {sorted(ignored)}")
        return cls(**known)

    def formatter(self) -> DecimalFormatter:
        """Build the number formatter this configuration describes."""
        return DecimalFormatter(self.pattern, self.locale)

    def apply_log_level(self):
        """Set the byteunits loggers to this configuration's level."""
        update_log_level(self.log_level)


class FormatConfigBuilder:
    """
    Builder pattern implementation for creating FormatConfig objects.

    This class provides a fluent interface for constructing FormatConfig
    objects with a chain of method calls.
    """

    def __init__(self):
        """Initialize a new FormatConfigBuilder with default values."""
        self._values: Dict[str, Any] = {}

    def pattern(self, pattern: str) -> "FormatConfigBuilder":
        """Set the number pattern."""
        self._values["pattern"] = pattern
        return self

    def locale(self, locale: str) -> "FormatConfigBuilder":
        """Set the locale identifier."""
        self._values["locale"] = locale
        return self

    def log_level(self, level: str) -> "FormatConfigBuilder":
        """Set the logging level."""
        self._values["log_level"] = level
        return self

    def build(self) -> FormatConfig:
        """Build and return a FormatConfig object."""
        return FormatConfig(**self._values)
