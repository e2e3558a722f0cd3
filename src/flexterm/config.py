"""Runtime settings for the command line front end."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Settings shared by the CLI, the demo tree and the layout file loader.

    Example:
        >>> settings = (Settings()
        ...     .with_log_level("debug")
        ...     .with_rules(horizontal="═"))
    """

    log_level: str = "WARNING"
    horizontal_rule: str = "─"  # Default char for rules that name none
    vertical_rule: str = "│"

    def with_log_level(self, level: str) -> Settings:
        """Set the log level by name (case-insensitive)."""
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}")
        self.log_level = level
        return self

    def with_rules(
        self,
        horizontal: Optional[str] = None,
        vertical: Optional[str] = None,
    ) -> Settings:
        """Set the default rule characters."""
        for char in (horizontal, vertical):
            if char is not None and len(char) != 1:
                raise ValueError(f"Rule character must be a single character, got {char!r}")
        if horizontal:
            self.horizontal_rule = horizontal
        if vertical:
            self.vertical_rule = vertical
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "log_level": self.log_level,
            "horizontal_rule": self.horizontal_rule,
            "vertical_rule": self.vertical_rule,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        settings = cls()
        settings.with_log_level(data.get("log_level", "WARNING"))
        settings.with_rules(data.get("horizontal_rule"), data.get("vertical_rule"))
        return settings

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Read settings from FLEXTERM_* environment variables.

        - FLEXTERM_LOG_LEVEL: logging level name
        - FLEXTERM_HRULE / FLEXTERM_VRULE: default rule characters
        """
        env = os.environ if environ is None else environ
        settings = cls()
        if level := env.get("FLEXTERM_LOG_LEVEL"):
            settings.with_log_level(level)
        settings.with_rules(env.get("FLEXTERM_HRULE") or None, env.get("FLEXTERM_VRULE") or None)
        return settings
