# src/buildflags/meta.py
"""Program identity used for env vars, config names, and display."""

PROGRAM_PACKAGE = "buildflags"
PROGRAM_SCRIPT = "buildflags"
PROGRAM_DISPLAY = "Buildflags"
PROGRAM_CONFIG = "buildflags"
PROGRAM_ENV = "BUILDFLAGS"
