"""
Application constants
"""

# Gantt timeline
WEEK_DAYS_BEFORE = 7
WEEK_DAYS_AFTER = 7
WEEK_COLUMN_WIDTH = 100  # px, wider to show more detail
MONTH_COLUMN_WIDTH = 30  # px
MIN_BAR_WIDTH = 50  # px

# Zoom
ZOOM_MIN = 0.5
ZOOM_MAX = 3.0
ZOOM_STEP = 1.2
ZOOM_DEFAULT = 1.0

# Task defaults
TASK_DEFAULT_DURATION = 1  # days
TASK_DEFAULT_PROGRESS = 0  # %
TASK_MAX_DURATION = 3650  # days, longer durations are capped

# Event priority inference
PRIORITY_COMFORT_DAYS = 7  # deadline this far away is always low priority
PRIORITY_SLACK_DAYS = 2  # slack at or below this is medium priority
PRIORITY_REMAINING_WORK_DAYS = 10  # no deadline: this much remaining work is medium

# Schedule filters
CONDITION_ALWAYS = "sempre"  # condition matching every filter
ALL_PROJECTS_ID = "null"
ALL_PROJECTS_LABEL = "Todos os projetos"

# Responsible name
SURNAME_PARTICLES = frozenset({
    "da", "de", "do", "das", "dos", "e", "di", "du", "del", "della",
    "van", "von", "der", "den", "la", "le",
})
NOT_DEFINED_LABEL = "Não definido"

# Notifications
NOTIFICATION_LIMIT = 50

# Locale
SUPPORTED_LANGUAGES = ("pt", "en", "es")
DATE_FORMAT_BR = "%d/%m/%Y"
EMPTY_VALUE = "—"

# Retry configuration
MAX_RETRIES = 3
RETRY_DELAY = 1  # seconds

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
