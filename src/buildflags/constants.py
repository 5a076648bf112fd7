# src/buildflags/constants.py
"""Central constants used across the project."""

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"
DEFAULT_ENV_EXECUTING_COMMAND: str = "EXECUTING_COMMAND"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"
DEFAULT_STRICT: bool = False
LOG_LEVEL_CHOICES: tuple[str, ...] = (
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
)

# --- flag resolution ---
COMMAND_ALL: str = "all"  # flag applies to every command
DID_YOU_MEAN_THRESHOLD: int = 4  # suggest only when distance is below this

# --- config discovery ---
# Order doubles as preference when several candidates sit in one directory
CONFIG_SUFFIXES: tuple[str, ...] = (".jsonc", ".json", ".toml")