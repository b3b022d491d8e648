"""Runtime configuration model for Chronoline.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
import random

from core.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_TIMELINE_TYPE,
    DEFAULT_TITLE_HEADLINE,
    SUPPORTED_TIMELINE_TYPES,
)
from core.errors import ChronolineConfigError


@dataclass(frozen=True)
class ChronolineConfig:
    """Validated runtime configuration.

    Attributes:
        title_headline: Headline of the generated title slide.
        delimiter: Single-character column delimiter of source tables.
        random_seed: Optional seed for fallback event id generation.
        timeline_type: Rendering preset name.
    """

    title_headline: str = DEFAULT_TITLE_HEADLINE
    delimiter: str = DEFAULT_DELIMITER
    random_seed: int | None = None
    timeline_type: str = DEFAULT_TIMELINE_TYPE

    @classmethod
    def from_env(cls) -> "ChronolineConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ChronolineConfigError: If environment values are invalid.
        """
        title_headline = os.getenv("CHRONOLINE_TITLE_HEADLINE", DEFAULT_TITLE_HEADLINE)
        delimiter = parse_delimiter(os.getenv("CHRONOLINE_DELIMITER", DEFAULT_DELIMITER))
        random_seed = _parse_random_seed(os.getenv("CHRONOLINE_RANDOM_SEED"))
        timeline_type = _parse_timeline_type(
            os.getenv("CHRONOLINE_TIMELINE_TYPE", DEFAULT_TIMELINE_TYPE)
        )
        return cls(
            title_headline=title_headline,
            delimiter=delimiter,
            random_seed=random_seed,
            timeline_type=timeline_type,
        )

    def build_random_source(self) -> random.Random | None:
        """Return a seeded generator, or None to use the process-level source."""
        if self.random_seed is None:
            return None
        return random.Random(self.random_seed)


def parse_delimiter(raw_value: str, source: str = "CHRONOLINE_DELIMITER") -> str:
    """Validate a delimiter value from the environment or a CLI flag.

    Args:
        raw_value: Raw delimiter string.
        source: Name of the setting, used in the error message.

    Returns:
        The delimiter character.

    Raises:
        ChronolineConfigError: If value is not exactly one character.
    """
    if len(raw_value) != 1:
        raise ChronolineConfigError(
            f"Invalid {source} value: "
            f"expected a single character, got '{raw_value}'. "
            f"Set {source} to one character such as '|'."
        )
    return raw_value


def _parse_random_seed(raw_value: str | None) -> int | None:
    """Parse the optional random seed environment value.

    Args:
        raw_value: Raw string from environment, or None when unset.

    Returns:
        Parsed integer seed, or None when unset or blank.

    Raises:
        ChronolineConfigError: If value cannot be parsed into int.
    """
    if raw_value is None or not raw_value.strip():
        return None
    try:
        return int(raw_value)
    except ValueError as error:
        raise ChronolineConfigError(
            "Invalid CHRONOLINE_RANDOM_SEED value: "
            f"expected integer, got '{raw_value}'. "
            "Set CHRONOLINE_RANDOM_SEED to a numeric value or unset it."
        ) from error


def _parse_timeline_type(raw_value: str) -> str:
    """Validate the timeline type environment value."""
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_TIMELINE_TYPES:
        supported = ", ".join(SUPPORTED_TIMELINE_TYPES)
        raise ChronolineConfigError(
            f"Invalid CHRONOLINE_TIMELINE_TYPE value '{raw_value}'. "
            f"Choose one of: {supported}."
        )
    return normalized
