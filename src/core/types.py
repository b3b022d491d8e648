"""Shared typed models.

This module defines immutable data models used by the row transformer,
the document assembler, the payload writer, and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Optional

RawRecord = Mapping[str, Optional[str]]

ConversionFailureKind = Literal[
    "empty_input",
    "no_candidate_rows",
    "no_surviving_events",
    "conversion_error",
]


@dataclass(frozen=True)
class DatePart:
    """Calendar position of an event boundary.

    Attributes:
        year: Required year, may be negative for BCE dates.
        month: Optional month in [1, 12].
        day: Optional day in [1, 31], not checked against the month.
        hour: Optional hour in [0, 23].
        minute: Optional minute in [0, 59].
        second: Optional second in [0, 59].
    """

    year: int
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None


@dataclass(frozen=True)
class MediaBlock:
    """Media attached to an event or to the title slide.

    Attributes:
        url: Media URL, always present.
        caption: Optional caption text.
        credit: Optional credit line.
        thumbnail: Optional thumbnail URL.
        alt: Optional alt text.
        title: Optional media title.
        link: Optional click-through URL.
        link_target: Optional click-through target.
    """

    url: str
    caption: str | None = None
    credit: str | None = None
    thumbnail: str | None = None
    alt: str | None = None
    title: str | None = None
    link: str | None = None
    link_target: str | None = None


@dataclass(frozen=True)
class BackgroundBlock:
    """Slide background; at least one field is set.

    Attributes:
        url: Optional background image URL.
        color: Optional background color.
    """

    url: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class EventText:
    """Headline and body of a slide."""

    headline: str
    text: str


@dataclass(frozen=True)
class TimelineEvent:
    """One event slide.

    Attributes:
        start_date: Required start position.
        text: Headline and body text.
        group: Group label, empty when ungrouped.
        unique_id: Non-empty slide identifier.
        end_date: Optional end position.
        display_date: Optional free-form date label.
        media: Optional media block.
        background: Optional background block.
        autolink: ``False`` to disable widget autolinking, ``None`` for default.
    """

    start_date: DatePart
    text: EventText
    group: str
    unique_id: str
    end_date: DatePart | None = None
    display_date: str | None = None
    media: MediaBlock | None = None
    background: BackgroundBlock | None = None
    autolink: Literal[False] | None = None


@dataclass(frozen=True)
class TitleText:
    """Title slide text; body text is only used by the fallback timeline."""

    headline: str
    text: str | None = None


@dataclass(frozen=True)
class TitleBlock:
    """Title slide of a timeline document."""

    text: TitleText
    media: MediaBlock | None = None
    background: BackgroundBlock | None = None


@dataclass(frozen=True)
class TimelineDocument:
    """Complete timeline document.

    Attributes:
        events: Event slides in source order.
        title: Title slide.
    """

    events: tuple[TimelineEvent, ...]
    title: TitleBlock


@dataclass(frozen=True)
class ConversionFailure:
    """Document-level conversion failure.

    Attributes:
        kind: Failure category.
        message: Human-readable message for the end user.
    """

    kind: ConversionFailureKind
    message: str


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of assembling a document; exactly one field is set."""

    document: TimelineDocument | None = None
    failure: ConversionFailure | None = None

    @property
    def ok(self) -> bool:
        """Return whether a document was produced."""
        return self.document is not None


@dataclass(frozen=True)
class SearchEntry:
    """Searchable event entry shown by event pickers.

    Attributes:
        unique_id: Expected event id derived from year and headline.
        label: Display label with year, headline, and text snippet.
        year: Raw year column value.
        headline: Headline column value.
        text: Body text column value.
    """

    unique_id: str
    label: str
    year: str
    headline: str
    text: str
