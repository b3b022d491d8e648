"""Rendering options for the timeline widget.

This module owns the named widget options for each timeline preset and
loads optional YAML overrides, so rendering parameters never leak into
the row transformation code.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Literal, Mapping, cast

import yaml

from core.constants import SUPPORTED_TIMELINE_TYPES
from core.errors import ChronolineOptionsError

TimelineType = Literal["modern", "ancient"]

DEFAULT_ZOOM_SEQUENCE: tuple[float, ...] = (0.5, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89)


@dataclass(frozen=True)
class TimelineOptions:
    """Widget options passed alongside a timeline document.

    Attributes:
        start_at_end: Open the widget on the last slide.
        default_bg_color: Background color for slides without one.
        timenav_height: Height in pixels of the time navigation strip.
        scale_factor: Screen widths spanned by the full timeline.
        initial_zoom: Index into ``zoom_sequence`` used on load.
        zoom_sequence: Allowed zoom levels.
        duration: Slide transition duration in milliseconds.
    """

    start_at_end: bool = False
    default_bg_color: str = "#ffffff"
    timenav_height: int = 150
    scale_factor: float = 2
    initial_zoom: int = 4
    zoom_sequence: tuple[float, ...] = DEFAULT_ZOOM_SEQUENCE
    duration: int = 1000


# Both presets currently share the same values; they stay separate so one can
# be tuned without touching the other.
_PRESETS: dict[str, TimelineOptions] = {
    "modern": TimelineOptions(scale_factor=2, initial_zoom=4),
    "ancient": TimelineOptions(scale_factor=2, initial_zoom=4),
}


def build_timeline_options(timeline_type: str) -> TimelineOptions:
    """Return the preset options for a timeline type.

    Args:
        timeline_type: Preset name, ``modern`` or ``ancient``.

    Returns:
        Options for the preset.

    Raises:
        ChronolineOptionsError: If the timeline type is unknown.
    """
    normalized = timeline_type.strip().lower()
    if normalized not in _PRESETS:
        supported = ", ".join(SUPPORTED_TIMELINE_TYPES)
        raise ChronolineOptionsError(
            f"Unsupported timeline type '{timeline_type}'. Choose one of: {supported}."
        )
    return _PRESETS[normalized]


def load_timeline_options(options_path: str, timeline_type: str) -> TimelineOptions:
    """Load preset options with overrides from a YAML file.

    The file holds either option names at the root, or one mapping of
    option names per timeline type.

    Args:
        options_path: File path to YAML overrides.
        timeline_type: Preset name used as the base.

    Returns:
        Preset options with overrides applied.

    Raises:
        ChronolineOptionsError: If the file is invalid or values are wrongly typed.
    """
    base_options = build_timeline_options(timeline_type)
    payload = _load_yaml_payload(options_path)
    root_mapping = _expect_mapping(payload, "options root")
    overrides = _select_overrides(root_mapping, timeline_type.strip().lower())
    return _apply_overrides(base_options, overrides)


def timeline_options_to_payload(options: TimelineOptions) -> dict[str, object]:
    """Serialize options into the widget's JSON option object."""
    return {
        "start_at_end": options.start_at_end,
        "default_bg_color": options.default_bg_color,
        "timenav_height": options.timenav_height,
        "scale_factor": options.scale_factor,
        "initial_zoom": options.initial_zoom,
        "zoom_sequence": list(options.zoom_sequence),
        "duration": options.duration,
    }


def _load_yaml_payload(options_path: str) -> object:
    options_file = Path(options_path).expanduser().resolve()
    if not options_file.exists():
        raise ChronolineOptionsError(
            f"Options file does not exist at {options_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(options_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise ChronolineOptionsError(
            f"Failed to read options at {options_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise ChronolineOptionsError(
            f"Failed to parse YAML options at {options_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return {}
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise ChronolineOptionsError(
            f"Invalid {context}: expected mapping, got {type(value).__name__}."
        )
    for key in value:
        if not isinstance(key, str):
            raise ChronolineOptionsError(
                f"Invalid {context}: expected string keys, got {type(key).__name__}."
            )
    return cast(Mapping[str, object], value)


def _select_overrides(root_mapping: Mapping[str, object], timeline_type: str) -> Mapping[str, object]:
    preset_keys = [key for key in root_mapping if key in SUPPORTED_TIMELINE_TYPES]
    if not preset_keys:
        return root_mapping
    if len(preset_keys) != len(root_mapping):
        raise ChronolineOptionsError(
            "Invalid options root: do not mix timeline type sections with option names."
        )
    if timeline_type not in root_mapping:
        return {}
    return _expect_mapping(root_mapping[timeline_type], f"'{timeline_type}' options")


def _apply_overrides(
    base_options: TimelineOptions,
    overrides: Mapping[str, object],
) -> TimelineOptions:
    known_fields = {field.name for field in fields(TimelineOptions)}
    unknown_keys = sorted(set(overrides) - known_fields)
    if unknown_keys:
        raise ChronolineOptionsError(
            f"Unknown option keys: {', '.join(unknown_keys)}. "
            f"Supported keys: {', '.join(sorted(known_fields))}."
        )
    parsed: dict[str, object] = {}
    for key, value in overrides.items():
        parsed[key] = _parse_option_value(key, value)
    return replace(base_options, **parsed)


def _parse_option_value(key: str, value: object) -> object:
    if key == "start_at_end":
        if not isinstance(value, bool):
            raise _type_error(key, "boolean", value)
        return value
    if key == "default_bg_color":
        if not isinstance(value, str) or not value.strip():
            raise _type_error(key, "non-empty string", value)
        return value
    if key == "zoom_sequence":
        if not isinstance(value, list) or not value:
            raise _type_error(key, "non-empty list of numbers", value)
        return tuple(_expect_number(key, item) for item in value)
    if key == "scale_factor":
        number = _expect_number(key, value)
        if number <= 0:
            raise _type_error(key, "positive number", value)
        return number
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _type_error(key, "non-negative integer", value)
    return value


def _expect_number(key: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error(key, "number", value)
    return value


def _type_error(key: str, expected: str, value: object) -> ChronolineOptionsError:
    return ChronolineOptionsError(
        f"Invalid value for option '{key}': expected {expected}, got {value!r}."
    )
