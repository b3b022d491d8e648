"""Core constants used across Chronoline modules.

This module centralizes column names, defaults, and failure messages.
Keeping values here avoids magic literals in transformation logic.
"""

from __future__ import annotations

DEFAULT_TITLE_HEADLINE = "Modern History Events"
DEFAULT_DELIMITER = "|"
DEFAULT_TIMELINE_TYPE = "modern"
SUPPORTED_TIMELINE_TYPES = ("modern", "ancient")
FALLBACK_ID_LENGTH = 7
FALLBACK_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
AUTOLINK_DISABLED_VALUE = "FALSE"
SEARCH_SNIPPET_LENGTH = 60

YEAR_COLUMN = "Year"
MONTH_COLUMN = "Month"
DAY_COLUMN = "Day"
TIME_COLUMN = "Time"
HEADLINE_COLUMN = "Headline"
TEXT_COLUMN = "Text"
GROUP_COLUMN = "Group"
UNIQUE_ID_COLUMN = "Unique ID"
END_YEAR_COLUMN = "End Year"
END_MONTH_COLUMN = "End Month"
END_DAY_COLUMN = "End Day"
END_TIME_COLUMN = "End Time"
DISPLAY_DATE_COLUMN = "Display Date"
AUTOLINK_COLUMN = "Autolink"

# Column names in MediaBlock field order: url, caption, credit, thumbnail,
# alt, title, link, link_target.
EVENT_MEDIA_COLUMNS = (
    "Media",
    "Media Caption",
    "Media Credit",
    "Thumbnail",
    "Alt",
    "Title",
    "Link",
    "Link Target",
)
TITLE_MEDIA_COLUMNS = (
    "Title Media",
    "Title Caption",
    "Title Credit",
    "Title Thumbnail",
    "Title Alt",
    "Title Title",
    "Title Link",
    "Title Link Target",
)
EVENT_BACKGROUND_COLUMNS = ("Background", "Background Color")
TITLE_BACKGROUND_COLUMNS = ("Title Background", "Title Background Color")

EMPTY_INPUT_MESSAGE = "No data found in CSV file"
NO_CANDIDATE_ROWS_MESSAGE = "No valid timeline events found. Each event must have a Year."
NO_SURVIVING_EVENTS_MESSAGE = "No valid timeline events found after filtering."
CONVERSION_ERROR_PREFIX = "Error converting data: "
NO_MATCHING_GROUPS_MESSAGE = "No rows match the selected groups:"
