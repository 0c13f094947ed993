DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DAYS_PER_WEEK = len(DAY_LABELS)

# Curated 1-10 scale, not evenly spaced
MOOD_VALUES = {
    "sad": 2,
    "anxious": 3,
    "neutral": 5,
    "calm": 7,
    "happy": 8,
    "excited": 9,
}
NEUTRAL_MOOD_VALUE = 5

# |change| must exceed this to count as a trend
TREND_DEADBAND = 0.5

TREND_STYLE = {
    "improving": ("📈", "#7A8471"),
    "declining": ("📉", "#B85450"),
    "stable": ("➡️", "#9B8F7A"),
}

WEEK_SELECTIONS = ("previous", "current", "next")

# Range labels are always English, independent of LC_TIME
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
