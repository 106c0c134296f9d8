# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "ASTRO_APP_NAME": "App display name (default: astro-scheduler).",
    "ASTRO_LOG_LEVEL": "Console logging level (default: INFO).",
    "ASTRO_DATA_DIR": "Local data directory for astro.log (default: .local/astro).",
    # Console
    "ASTRO_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    "ASTRO_DEMO_ON_START": "Replay the sample day before the console starts (default: false).",
    # Scheduler
    "ASTRO_UNDO_DEPTH": "Max undo history entries; 0 means unbounded (default: 0).",
    "ASTRO_LOG_OBSERVER": "Log every schedule change via LoggingTaskObserver (default: true).",
}
