# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "DAYPLAN_APP_NAME": "App display name (default: day-planner).",
    "DAYPLAN_LOG_LEVEL": "Console logging level (default: WARNING).",
    "DAYPLAN_LOG_TO_FILE": "Also write full DEBUG logs to <data_dir>/day_planner.log (true/false).",
    # Paths (gitignored)
    "DAYPLAN_DATA_DIR": "Local data directory for log files (default: .local/day_planner).",
    # Entry point
    "DAYPLAN_DEMO_ENABLED": "Run the built-in demo schedule on start (default: true).",
    "DAYPLAN_CONSOLE_ENABLED": "Open the interactive /command console after the demo (default: false).",
}
