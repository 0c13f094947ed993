def score_bar(score: float | None, width: int = 10) -> str:
    """Fixed-width bar for a 0-10 score; blank for a day without data."""
    if score is None:
        return "[" + " " * width + "]"
    filled = max(0, min(width, round(score * width / 10)))
    return f"[{'█' * filled}{'░' * (width - filled)}]"


def format_score(score: float | None) -> str:
    if score is None:
        return "  -"
    return f"{score:>4.1f}"
