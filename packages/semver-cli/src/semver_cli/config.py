# SPDX-License-Identifier: MIT
"""CLI configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration.

    Attributes:
        output_format: "text" for human-readable lines, "json" for JSON documents
        color: Whether messages are colored
    """

    output_format: str = "text"
    color: bool = True

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output format '{self.output_format}'. "
                f"Expected one of: {', '.join(OUTPUT_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "CLIConfig":
        """Create configuration from environment variables.

        SEMVER_OUTPUT_FORMAT selects the output format, and any non-empty
        NO_COLOR disables colored messages.
        """
        return cls(
            output_format=os.getenv("SEMVER_OUTPUT_FORMAT", "text").strip().lower() or "text",
            color=not os.getenv("NO_COLOR"),
        )


def load_config() -> CLIConfig:
    """Load the CLI configuration.

    Raises:
        ConfigError: If an environment variable holds an invalid value
    """
    return CLIConfig.from_env()
