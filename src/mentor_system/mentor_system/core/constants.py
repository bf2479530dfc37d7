"""Constants and defaults.

Note: Keep payment rule numbers here so the calculator and reports agree.
"""

CHAPTER_RATE = 500
CHAPTER_MINUTES_CAP = 240
DEFAULT_BASE_RATE = 10
DEFAULT_RATING = 5.0

PAYMENT_WINDOW_DAYS = 90

DEFAULT_PHOTO_URL = "https://placehold.co/100x100/4F46E5/FFFFFF?text=P4I"
DEFAULT_TASK_STATUS = "Done"

DEFAULT_TEAMS = (
    "Lecture Team",
    "Content Team (Chapterwise)",
    "Test Series Team",
    "Doubt Session Team",
    "Mentorship Team",
)
