# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "MEEP_APP_NAME": "App display name (default: meep).",
    "MEEP_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    "MEEP_LOG_DIR": "Directory for meep.log (default: .local/meep).",
    "MEEP_LOG_TO_FILE": "Write meep.log at all (true/false, default: true).",
    # Storage
    "MEEP_DATA_DIR": "Data directory (default: data).",
    "MEEP_TASKS_FILE": "Task file path (default: <data_dir>/meep.txt).",
    # Console
    "MEEP_AUTOLOAD": "Run `load` once when the console starts (true/false, default: false).",
}
