"""Static demo timeline used when a table cannot be converted."""

from __future__ import annotations

from core.types import DatePart, EventText, TimelineDocument, TimelineEvent, TitleBlock, TitleText


def create_fallback_timeline() -> TimelineDocument:
    """Return a fixed three-event timeline for demos and diagnostics."""
    return TimelineDocument(
        events=(
            TimelineEvent(
                start_date=DatePart(year=2023, month=4, day=9),
                text=EventText(headline="Test Event 1", text="This is a test event."),
                group="",
                unique_id="test-event-1",
            ),
            TimelineEvent(
                start_date=DatePart(year=2024, month=1, day=15),
                text=EventText(headline="Test Event 2", text="Another test event."),
                group="",
                unique_id="test-event-2",
            ),
            TimelineEvent(
                start_date=DatePart(year=2025, month=4, day=9),
                end_date=DatePart(year=2025, month=12, day=31),
                text=EventText(headline="Current Test Event", text="Spans time."),
                group="",
                unique_id="current-test-event",
            ),
        ),
        title=TitleBlock(text=TitleText(headline="Test Timeline", text="Fallback timeline.")),
    )
