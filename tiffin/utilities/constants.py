from typing import Final

WEEK_DAYS: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
RATING_VALUES: Final[tuple[int, ...]] = (1, 2, 3, 4, 5)
WEEK_DAY_ABBREVIATIONS: Final[tuple[str, ...]] = tuple(day[:3] for day in WEEK_DAYS)
