# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKDESK_APP_NAME": "App display name (default: taskdesk).",
    "TASKDESK_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    "TASKDESK_DATA_DIR": "Local directory for taskdesk.log (default: .local/taskdesk).",
    # Display
    "TASKDESK_DATE_FORMAT": "strftime format for deadlines in the table (default: %d.%m.%Y, ru-RU).",
    "TASKDESK_DEFAULT_FILTER": "Filter mode on start: all | active | completed (default: all).",
    "TASKDESK_COLOR": "Colored status badges in a terminal (true/false, default: true). NO_COLOR disables.",
}
