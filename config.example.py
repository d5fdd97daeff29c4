# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets; keep TAREAS_JWT_SECRET in .env (gitignored) or the process environment.
"""

ENV_VARS = {
    # App / logging
    "TAREAS_APP_NAME": "App display name (default: tareas-api).",
    "TAREAS_LOG_LEVEL": "Console logging level (default: INFO).",
    # HTTP
    "TAREAS_HOST": "Bind address (default: 0.0.0.0).",
    "TAREAS_PORT": "Bind port (default: 3000).",
    # Paths
    "TAREAS_DATA_DIR": "Directory for the JSON files and the log file (default: data).",
    "TAREAS_TASKS_PATH": "Task list JSON path (default: <data_dir>/tareas.json).",
    "TAREAS_USERS_PATH": "User list JSON path (default: <data_dir>/usuarios.json).",
    # Auth
    "TAREAS_JWT_SECRET": "Token signing secret (required; JWT_SECRET is accepted too).",
    "TAREAS_JWT_ALGORITHM": "Token signing algorithm (default: HS256).",
    "TAREAS_TOKEN_TTL_SECONDS": "Token lifetime in seconds (default: 3600).",
    "TAREAS_BCRYPT_ROUNDS": "bcrypt work factor, 4..31 (default: 10).",
}
