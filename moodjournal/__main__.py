import argparse
import json
import logging
import sys
from datetime import datetime

from moodjournal.config import settings
from moodjournal.services.export import weekly_mood_to_excel, weekly_mood_to_markdown
from moodjournal.services.mood_analytics import (
    count_entries,
    process_weekly_mood_data,
    selected_week_reference,
    week_range_text,
    weekly_summary,
)
from moodjournal.utils.constants import WEEK_SELECTIONS

logger = logging.getLogger(__name__)


def load_entries(path: str) -> list[dict]:
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)
    # Accept a raw list or a paginated API response
    if isinstance(payload, dict):
        payload = payload.get("journals") or payload.get("data") or []
    if not isinstance(payload, list):
        raise ValueError("expected a list of journal entries")
    return [e for e in payload if isinstance(e, dict)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moodjournal",
        description="Weekly mood summary for exported journal entries",
    )
    parser.add_argument("entries", help="JSON file with journal entries")
    parser.add_argument("--week", choices=WEEK_SELECTIONS, default="current")
    parser.add_argument("--xlsx", metavar="PATH", help="also write an Excel table")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        entries = load_entries(args.entries)
    except (OSError, ValueError):
        logger.exception("Failed to read entries from %s", args.entries)
        return 1
    logger.info("Loaded %d entries from %s", len(entries), args.entries)

    # The only place the real clock is read
    now = datetime.now()
    data = process_weekly_mood_data(entries, selected_week_reference(args.week, lambda: now))
    print(weekly_summary(data, week_range_text(args.week, lambda: now)))

    counts = count_entries(entries)
    print(
        f"\nAll entries: {counts.professional} professional, "
        f"{counts.personal} personal, {counts.with_mood} with a mood"
    )

    if args.xlsx:
        buf = weekly_mood_to_excel(data)
        if buf is None:
            logger.warning("Excel export failed, printing Markdown table instead")
            print()
            print(weekly_mood_to_markdown(data))
        else:
            with open(args.xlsx, "wb") as fh:
                fh.write(buf.getvalue())
            logger.info("Wrote %s", args.xlsx)

    return 0


if __name__ == "__main__":
    sys.exit(main())
