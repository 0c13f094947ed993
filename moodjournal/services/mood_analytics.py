from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Any, Callable, Iterable, Mapping, Sequence

from moodjournal.models import (
    Category,
    CategoryCounts,
    JournalEntry,
    Mood,
    Trend,
    TrendResult,
    WeeklyMoodData,
)
from moodjournal.services.week import (
    format_week_range,
    get_day_of_week_index,
    get_week_end,
    get_week_start,
    parse_timestamp,
    shift_week,
)
from moodjournal.utils.constants import (
    DAY_LABELS,
    DAYS_PER_WEEK,
    MOOD_VALUES,
    NEUTRAL_MOOD_VALUE,
    TREND_DEADBAND,
    TREND_STYLE,
)
from moodjournal.utils.formatting import format_score, score_bar

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
EntryLike = JournalEntry | Mapping[str, Any]


def round_half_up(value: float) -> float:
    """Round to one decimal, halves toward +infinity."""
    return math.floor(value * 10 + 0.5) / 10


def mood_to_value(label: Any) -> int:
    mood = Mood.from_label(label)
    if mood is Mood.UNRECOGNIZED:
        return NEUTRAL_MOOD_VALUE
    return MOOD_VALUES[mood.value]


def _as_entry(entry: EntryLike) -> JournalEntry:
    if isinstance(entry, JournalEntry):
        return entry
    return JournalEntry.from_api(entry)


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def process_weekly_mood_data(
    entries: Iterable[EntryLike] | None,
    reference: datetime,
) -> WeeklyMoodData:
    """Average mood per weekday and category for the week containing `reference`.

    Slots without any entry are None, never 0. Entries with an unknown
    category or an unparseable createdAt are skipped.
    """
    week_start = get_week_start(reference)
    week_end = get_week_end(reference)

    buckets: dict[Category, list[list[int]]] = {
        Category.PROFESSIONAL: [[] for _ in range(DAYS_PER_WEEK)],
        Category.PERSONAL: [[] for _ in range(DAYS_PER_WEEK)],
    }

    used = 0
    for raw in entries or ():
        entry = _as_entry(raw)
        created = parse_timestamp(entry.created_at)
        if created is None:
            logger.debug("Skipping entry %r: no usable createdAt", entry.id)
            continue
        if not week_start <= created <= week_end:
            continue
        category = Category.from_label(entry.category)
        if category is None:
            continue
        buckets[category][get_day_of_week_index(created)].append(mood_to_value(entry.mood))
        used += 1

    logger.debug(
        "Aggregated %d entries for week %s - %s", used, week_start.date(), week_end.date()
    )

    def averages(category: Category) -> tuple[float | None, ...]:
        return tuple(
            round_half_up(_mean(values)) if values else None
            for values in buckets[category]
        )

    return WeeklyMoodData(
        professional_mood=averages(Category.PROFESSIONAL),
        personal_mood=averages(Category.PERSONAL),
        days=DAY_LABELS,
    )


def get_week_mood_data(entries: Iterable[EntryLike] | None, reference: datetime) -> WeeklyMoodData:
    return process_weekly_mood_data(entries, reference)


def get_current_week_mood_data(
    entries: Iterable[EntryLike] | None, clock: Clock = datetime.now
) -> WeeklyMoodData:
    return process_weekly_mood_data(entries, clock())


def get_previous_week_mood_data(
    entries: Iterable[EntryLike] | None, clock: Clock = datetime.now
) -> WeeklyMoodData:
    return process_weekly_mood_data(entries, shift_week(clock(), -1))


def get_next_week_mood_data(
    entries: Iterable[EntryLike] | None, clock: Clock = datetime.now
) -> WeeklyMoodData:
    return process_weekly_mood_data(entries, shift_week(clock(), 1))


_SELECTION_OFFSETS = {"previous": -1, "current": 0, "next": 1}


def selected_week_reference(selection: str, clock: Clock = datetime.now) -> datetime:
    try:
        offset = _SELECTION_OFFSETS[selection]
    except KeyError:
        raise ValueError(f"Unknown week selection: {selection!r}") from None
    return shift_week(clock(), offset)


def week_range_text(selection: str, clock: Clock = datetime.now) -> str:
    reference = selected_week_reference(selection, clock)
    return format_week_range(get_week_start(reference), get_week_end(reference))


def has_week_data(data: WeeklyMoodData) -> bool:
    return any(v is not None for v in data.professional_mood) or any(
        v is not None for v in data.personal_mood
    )


def weekly_average(values: Sequence[float | None]) -> float:
    present = [v for v in values if v is not None]
    if not present:
        return 0.0
    return round_half_up(_mean(present))


def _trend_result(trend: Trend, change: float) -> TrendResult:
    emoji, color = TREND_STYLE[trend.value]
    return TrendResult(trend=trend, change=change, emoji=emoji, color=color)


def analyze_mood_trend(values: Sequence[float | None]) -> TrendResult:
    """Compare the mean of the second half of the readings with the first.

    With an odd number of readings the middle one belongs to the first half.
    """
    present = [v for v in values if v is not None]
    if len(present) < 2:
        return _trend_result(Trend.STABLE, 0.0)

    middle = math.ceil(len(present) / 2)
    first_half = present[:middle]
    second_half = present[middle:]
    raw_change = _mean(second_half) - _mean(first_half)
    change = round_half_up(raw_change)

    # Classify on the unrounded delta
    if raw_change > TREND_DEADBAND:
        return _trend_result(Trend.IMPROVING, change)
    elif raw_change < -TREND_DEADBAND:
        return _trend_result(Trend.DECLINING, change)
    return _trend_result(Trend.STABLE, change)


def count_entries(entries: Iterable[EntryLike] | None) -> CategoryCounts:
    professional = personal = with_mood = 0
    for raw in entries or ():
        entry = _as_entry(raw)
        category = Category.from_label(entry.category)
        if category is Category.PROFESSIONAL:
            professional += 1
        elif category is Category.PERSONAL:
            personal += 1
        if entry.mood and entry.mood != "other":
            with_mood += 1
    return CategoryCounts(professional=professional, personal=personal, with_mood=with_mood)


def weekly_summary(data: WeeklyMoodData, week_range: str) -> str:
    if not has_week_data(data):
        return f"Mood for {week_range}: no entries this week."

    lines = [f"Mood for {week_range}\n"]
    for category in (Category.PROFESSIONAL, Category.PERSONAL):
        values = data.for_category(category)
        trend = analyze_mood_trend(values)
        lines.append(
            f"{category.value.capitalize()}: avg {weekly_average(values):.1f} / 10, "
            f"{trend.emoji} {trend.trend.value} ({trend.change:+.1f})"
        )
    lines.append("")

    for day, prof, pers in zip(data.days, data.professional_mood, data.personal_mood):
        lines.append(
            f"{day}  work {score_bar(prof)} {format_score(prof)}  "
            f"life {score_bar(pers)} {format_score(pers)}"
        )

    return "\n".join(lines)
