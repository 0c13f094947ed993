"""Export helpers: weekly mood table as Markdown and as Excel (openpyxl)."""

from __future__ import annotations

import io
import logging

from moodjournal.models import WeeklyMoodData

logger = logging.getLogger(__name__)

_HEADER = ("Day", "Professional", "Personal")


def _cell(value: float | None) -> str:
    return "" if value is None else f"{value:.1f}"


def weekly_mood_to_markdown(data: WeeklyMoodData) -> str:
    lines = [
        "| " + " | ".join(_HEADER) + " |",
        "|" + "|".join("---" for _ in _HEADER) + "|",
    ]
    for day, prof, pers in zip(data.days, data.professional_mood, data.personal_mood):
        lines.append(f"| {day} | {_cell(prof)} | {_cell(pers)} |")
    return "\n".join(lines)


def weekly_mood_to_excel(data: WeeklyMoodData, title: str = "Weekly mood") -> io.BytesIO | None:
    """Write the week as a one-sheet .xlsx.

    Returns None if generation fails (caller should fall back to Markdown).
    """
    try:
        from openpyxl import Workbook
        from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
    except ImportError:
        logger.warning("openpyxl not installed, Excel export unavailable")
        return None

    try:
        wb = Workbook()
        ws = wb.active
        ws.title = title[:31]  # Excel sheet name limit

        header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
        header_font = Font(bold=True, size=11, color="FFFFFF")
        center = Alignment(horizontal="center", vertical="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )

        for col_idx, label in enumerate(_HEADER, start=1):
            cell = ws.cell(row=1, column=col_idx, value=label)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = center
            cell.border = thin_border

        rows = zip(data.days, data.professional_mood, data.personal_mood)
        for row_idx, (day, prof, pers) in enumerate(rows, start=2):
            ws.cell(row=row_idx, column=1, value=day).border = thin_border
            for col_idx, value in ((2, prof), (3, pers)):
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = thin_border
                cell.alignment = center
                if value is not None:
                    cell.number_format = "0.0"

        for col_idx, label in enumerate(_HEADER, start=1):
            ws.column_dimensions[ws.cell(row=1, column=col_idx).column_letter].width = max(len(label) + 2, 10)

        buf = io.BytesIO()
        wb.save(buf)
        buf.seek(0)
        return buf

    except Exception:
        logger.exception("Excel generation failed")
        return None
